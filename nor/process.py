import logging
import subprocess

from nor.errors import SubprocessFailure

logger = logging.getLogger(__name__)


def run(cmd: list[str], input: str | None = None, check: bool = True) -> subprocess.CompletedProcess[str]:
    """Run an external command to completion and capture its output.

    Raises:
        SubprocessFailure: The command could not be launched, or exited with
            a non-zero status while ``check`` is set.
    """
    logger.debug(f"Running command: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, input=input, capture_output=True, text=True, check=check)
    except OSError as e:
        logger.error(f"{cmd[0]} could not be started: {e}")
        raise SubprocessFailure(f"{cmd[0]} could not be started: {e}") from e
    except subprocess.CalledProcessError as e:
        error_msg = (e.stderr or e.stdout or "").strip()
        logger.error(f"{cmd[0]} failed with status {e.returncode}: {error_msg}")
        raise SubprocessFailure(f"{' '.join(cmd)} failed with status {e.returncode}: {error_msg}") from e
    logger.debug(f"{cmd[0]} exited with status {result.returncode}")
    return result
