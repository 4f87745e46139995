"""
Project context
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from .constants import (
    DEFAULT_CWD,
    DEFAULT_DOMAINS,
    DEFAULT_PHP_VERSION,
    DEFAULT_PROJECT_NAME,
    DEFAULT_TERM_HEIGHT,
    DEFAULT_TERM_WIDTH,
    COMPOSE_FILE_NAME,
    ENV_FILE_NAME,
    FILE_PREFIX,
)
from .exceptions import ConfigError


@dataclass(frozen=True)
class Term:
    """Terminal dimensions passed to interactive commands"""
    width: int = DEFAULT_TERM_WIDTH
    height: int = DEFAULT_TERM_HEIGHT


@dataclass(frozen=True)
class Context:
    """
    Immutable project configuration, built once per invocation.
    
    Attributes:
        name: Project identifier, used in container names
        cwd: Absolute working directory, the host root for push/pull
        term: Terminal size hints
        pv: Optional path to the `pv` binary
        domains: Domains served by the environment
        php_version: PHP image version
    """
    name: str
    cwd: Path
    term: Term = field(default_factory=Term)
    pv: Optional[Path] = None
    domains: Tuple[str, ...] = tuple(DEFAULT_DOMAINS)
    php_version: str = DEFAULT_PHP_VERSION
    
    def __post_init__(self):
        if not self.name:
            raise ConfigError("Context name must not be empty")
        object.__setattr__(self, "cwd", Path(self.cwd))
        object.__setattr__(self, "domains", tuple(self.domains))
        if self.pv is not None:
            object.__setattr__(self, "pv", Path(self.pv))
    
    @classmethod
    def default(cls) -> "Context":
        """Context used by examples and tests"""
        return cls(name=DEFAULT_PROJECT_NAME, cwd=Path(DEFAULT_CWD))
    
    @classmethod
    def from_cwd(cls, cwd: Path, **kwargs) -> "Context":
        """Create a context whose name is derived from the directory basename"""
        cwd = Path(cwd)
        return cls(name=cwd.name or DEFAULT_PROJECT_NAME, cwd=cwd, **kwargs)
    
    @property
    def file_prefix(self) -> Path:
        """Directory holding generated files for this project"""
        return self.cwd / f"{FILE_PREFIX}{self.name}"
    
    @property
    def compose_file(self) -> Path:
        return self.file_prefix / COMPOSE_FILE_NAME
    
    @property
    def env_file(self) -> Path:
        return self.file_prefix / ENV_FILE_NAME
