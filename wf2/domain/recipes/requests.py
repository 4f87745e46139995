"""
Operation requests handed to recipes by the CLI layer
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple, Union

from ...core.constants import PHP_USER


@dataclass(frozen=True)
class Up:
    detached: bool = False


@dataclass(frozen=True)
class Down:
    pass


@dataclass(frozen=True)
class Stop:
    pass


@dataclass(frozen=True)
class Exec:
    trailing: Tuple[str, ...] = ()
    user: str = PHP_USER


@dataclass(frozen=True)
class DBImport:
    path: Path


@dataclass(frozen=True)
class DBDump:
    pass


@dataclass(frozen=True)
class Doctor:
    pass


@dataclass(frozen=True)
class Pull:
    paths: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Push:
    paths: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PassThrough:
    command: str
    trailing: Tuple[str, ...] = field(default_factory=tuple)


OperationRequest = Union[Up, Down, Stop, Exec, DBImport, DBDump, Doctor, Pull, Push, PassThrough]
