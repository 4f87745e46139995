"""
Subprocess command runner
"""
import subprocess
from pathlib import Path
from typing import Optional

from ...core.interfaces import CommandRunner
from ...core.logging import get_logger

logger = get_logger(__name__)


class SubprocessRunner(CommandRunner):
    """
    Run command lines through the shell with the terminal attached.
    
    Stdio is inherited so interactive commands (`docker exec -it`) work.
    There is no timeout: the call blocks until the process exits.
    """
    
    def run(self, command_line: str, cwd: Optional[Path] = None) -> int:
        logger.debug(f"spawn: {command_line}")
        result = subprocess.run(
            command_line,
            shell=True,
            cwd=str(cwd) if cwd else None,
        )
        return result.returncode
