"""Subprocess-based check helpers."""

import logging
import subprocess
from collections.abc import Sequence

from .types import Error, Ok

logger = logging.getLogger(__name__)


def command_output(command: str, args: Sequence[str] = ()) -> tuple[int, str]:
    """Run a command and return its exit code and combined output.

    Blocks until the command exits; no timeout is applied. If the command
    cannot be started, the exit code follows shell convention (127 when it
    is not found, 126 otherwise) and the output explains why.

    Args:
        command: Executable name or path
        args: Arguments passed to the command

    Returns:
        Tuple of (exit code, stdout and stderr text)
    """
    cmd = [command, *args]
    logger.debug("Running %s", cmd)
    try:
        result = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
        )
    except FileNotFoundError:
        logger.debug("Command not found: %s", command)
        return 127, f"{command}: command not found\n"
    except (OSError, ValueError) as exc:
        logger.debug("Could not start %s: %s", command, exc)
        return 126, f"{command}: {getattr(exc, 'strerror', None) or exc}\n"

    logger.debug("%s exited with %d", command, result.returncode)
    return result.returncode, result.stdout


def command_succeeds(
    command: str, args: Sequence[str] = (), remedy: str = ""
) -> Ok | Error:
    """Check that a command exits with status 0.

    Any other status, including a command that is not installed, gives an
    ``Error`` carrying the command's output and ``remedy``.
    """
    returncode, output = command_output(command, args)
    if returncode == 0:
        return Ok()
    return Error(output=output, remedy=remedy)
