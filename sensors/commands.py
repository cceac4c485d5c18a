from __future__ import annotations

import logging
import subprocess
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)

CommandRunner = Callable[[Sequence[str]], Optional[str]]

DEFAULT_COMMAND_TIMEOUT = 2.0


def run_command(argv: Sequence[str], timeout: float = DEFAULT_COMMAND_TIMEOUT) -> Optional[str]:
    """Run a diagnostic command and return its stdout, or ``None`` if it produced nothing usable."""
    try:
        result = subprocess.run(
            list(argv),
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug(
            "Command could not be run",
            extra={"source": argv[0], "reason": str(exc)},
        )
        return None
    if result.returncode != 0:
        logger.debug(
            "Command exited with an error",
            extra={"source": argv[0], "reason": f"exit status {result.returncode}"},
        )
        return None
    return result.stdout
