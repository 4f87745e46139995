"""
Core interfaces for dependency injection
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class CommandRunner(ABC):
    """Shell command runner interface"""
    
    @abstractmethod
    def run(self, command_line: str, cwd: Optional[Path] = None) -> int:
        """
        Run a shell command line to completion.
        
        Returns:
            Process exit code
        
        Raises:
            OSError: If the process could not be spawned
        """
        pass


class Reporter(ABC):
    """User-facing notification interface"""
    
    @abstractmethod
    def info(self, message: str) -> None:
        """Display info message"""
        pass
    
    @abstractmethod
    def error(self, message: str) -> None:
        """Display error message"""
        pass
