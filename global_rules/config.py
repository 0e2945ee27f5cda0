"""Loading and validation of the global rules configuration file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from global_rules.constants import CONFIG_FILENAME, CONFIG_SCHEMA, SOURCE_DIR_FIELD
from global_rules.errors import (
    InvalidConfigFormatError,
    MissingConfigFileError,
    MissingSourceDirSettingError,
    SourceDirNotFoundError,
)
from global_rules.models import GlobalRulesConfig
from global_rules.utils import read_json, write_json

logger = logging.getLogger(__name__)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def default_config_path() -> Path:
    return Path(__file__).resolve().parent.parent / CONFIG_FILENAME


class ConfigRepository:
    """Reads ``config.json`` on every call; nothing is cached between calls."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or default_config_path()
        self._validator = Draft202012Validator(CONFIG_SCHEMA)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> GlobalRulesConfig:
        if not self._path.is_file():
            raise MissingConfigFileError(self._path)

        try:
            payload = read_json(self._path)
        except (OSError, ValueError) as exc:
            raise InvalidConfigFormatError(self._path, str(exc)) from exc

        if not isinstance(payload, dict):
            raise InvalidConfigFormatError(
                self._path, f"expected a JSON object, got {type(payload).__name__}"
            )

        error = next(iter(self._validator.iter_errors(payload)), None)
        if error is not None:
            raise InvalidConfigFormatError(self._path, format_schema_error(error))

        source_dir = payload.get(SOURCE_DIR_FIELD)
        if not source_dir or not source_dir.strip():
            raise MissingSourceDirSettingError()

        if not os.path.isdir(source_dir) or not os.access(source_dir, os.R_OK):
            raise SourceDirNotFoundError(source_dir)

        logger.debug("Loaded config from %s: %s=%s", self._path, SOURCE_DIR_FIELD, source_dir)
        return GlobalRulesConfig(global_rules_source_dir=source_dir, config_path=self._path)

    def save(self, source_dir: str) -> GlobalRulesConfig:
        if not source_dir or not source_dir.strip():
            raise MissingSourceDirSettingError()

        payload: dict = {}
        if self._path.is_file():
            try:
                existing = read_json(self._path)
            except (OSError, ValueError):
                existing = None
            if isinstance(existing, dict):
                payload = existing

        payload[SOURCE_DIR_FIELD] = source_dir
        write_json(self._path, payload)
        logger.info("Saved %s=%s to %s", SOURCE_DIR_FIELD, source_dir, self._path)
        return GlobalRulesConfig(global_rules_source_dir=source_dir, config_path=self._path)
