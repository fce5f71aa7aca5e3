"""Blocking invocation of external commands."""

import subprocess
from typing import Optional, Sequence

from dbdump.core.exceptions import ProcessLaunchError, ProcessTimeoutError
from dbdump.core.logging import get_logger

logger = get_logger(__name__)

OUTPUT_ENCODING = "utf-8"


def run(args: Sequence[str], timeout: Optional[float] = None) -> str:
    """Run a command and return everything it wrote to stdout.

    The call blocks until the child exits and its output is drained. A
    non-zero exit status is logged but the captured output is still
    returned.

    Args:
        args: Program and its arguments
        timeout: Seconds to wait before killing the child (None waits forever)

    Returns:
        Decoded standard output of the command

    Raises:
        ProcessLaunchError: If the program cannot be started
        ProcessTimeoutError: If the program outlives ``timeout``
    """
    args = [str(arg) for arg in args]
    logger.debug("command_started", args=args)

    try:
        process = subprocess.Popen(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        raise ProcessLaunchError(
            f"Failed to launch {args[0]}: {e}",
            details={"args": args},
        ) from e

    with process:
        try:
            raw_stdout, raw_stderr = process.communicate(timeout=timeout)
        except subprocess.TimeoutExpired as e:
            process.kill()
            process.communicate()
            raise ProcessTimeoutError(
                f"{args[0]} did not finish within {timeout} seconds",
                details={"args": args, "timeout": timeout},
            ) from e

    stdout = decode_output(raw_stdout, args)
    stderr = raw_stderr.decode(OUTPUT_ENCODING, errors="replace")

    if process.returncode != 0:
        logger.warning(
            "command_failed",
            args=args,
            returncode=process.returncode,
            stderr=stderr.strip(),
        )

    logger.debug("command_finished", returncode=process.returncode, output_size=len(stdout))
    return stdout


def decode_output(data: bytes, args: Sequence[str]) -> str:
    """Decode command output as UTF-8.

    Invalid byte sequences (e.g. raw blob contents) are replaced with
    U+FFFD and reported with a warning.
    """
    try:
        return data.decode(OUTPUT_ENCODING)
    except UnicodeDecodeError as e:
        logger.warning(
            "command_output_not_utf8",
            args=list(args),
            position=e.start,
        )
        return data.decode(OUTPUT_ENCODING, errors="replace")
