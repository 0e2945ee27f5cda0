from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Union

from global_rules.constants import SOURCE_DIR_FIELD


class ErrorType(str, Enum):
    CONFIG_PARSING_ERROR = "CONFIG_PARSING_ERROR"
    OPERATION_ERROR = "OPERATION_ERROR"


class SyncDirection(str, Enum):
    LOAD = "load"
    SAVE = "save"


@dataclass(frozen=True)
class OperationError:
    type: ErrorType
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"type": self.type.value, "message": self.message}


@dataclass(frozen=True)
class SyncSuccess:
    success: bool = field(default=True, init=False)

    def as_dict(self) -> dict[str, Any]:
        return {"success": True}


@dataclass(frozen=True)
class SyncFailure:
    errors: tuple[OperationError, ...]
    success: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("SyncFailure requires at least one error")
        object.__setattr__(self, "errors", tuple(self.errors))

    def as_dict(self) -> dict[str, Any]:
        return {
            "success": False,
            "errors": [error.as_dict() for error in self.errors],
        }


SyncResult = Union[SyncSuccess, SyncFailure]


@dataclass(frozen=True)
class SyncRequest:
    direction: SyncDirection
    path: str

    def __post_init__(self) -> None:
        if not self.path or not self.path.strip():
            raise ValueError("path must not be empty")

    @property
    def project_dir(self) -> Path:
        return Path(self.path)


@dataclass(frozen=True)
class GlobalRulesConfig:
    global_rules_source_dir: str
    config_path: Path

    @property
    def source_dir(self) -> Path:
        return Path(self.global_rules_source_dir)

    def as_dict(self) -> dict[str, str]:
        return {SOURCE_DIR_FIELD: self.global_rules_source_dir}
