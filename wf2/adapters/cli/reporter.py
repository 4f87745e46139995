"""
Rich-based notification output
"""
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from ...core.interfaces import Reporter
from ...core.logging import get_stdout_console


class RichReporter(Reporter):
    """Rich-based reporter"""
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_stdout_console()
    
    def info(self, message: str) -> None:
        """Display info message"""
        self.console.print(Text.assemble(("ℹ ", "cyan"), message), soft_wrap=True)
    
    def error(self, message: str) -> None:
        """Display error message"""
        self.console.print(Text.assemble(("✗ ", "red"), message), soft_wrap=True)
    
    def plan(self, lines: List[str]) -> None:
        """Display a dry-run task listing"""
        for line in lines:
            self.console.print(Text(line), soft_wrap=True)
