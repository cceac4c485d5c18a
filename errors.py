"""Error taxonomy for the VFD status controller.

Only :class:`PrivilegeError` ever reaches the command line. The other two are
raised and caught inside the sensor and output layers, which degrade to a
default value or a skipped write.
"""

from __future__ import annotations

import os


class VfdError(Exception):
    """Base class for controller errors."""


class SourceUnavailable(VfdError):
    """A sensor source is missing, unreadable, or produced unparsable output."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


class WriteFailed(VfdError):
    """A device endpoint is missing or not writable."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class PrivilegeError(VfdError):
    """The process lacks the privilege required to drive the device endpoints."""


def ensure_privileged() -> None:
    if os.geteuid() != 0:
        raise PrivilegeError("This program requires root privileges. Please run with sudo.")
