from pathlib import Path

from global_rules.constants import CONFIG_FILENAME, SOURCE_DIR_FIELD


class GlobalRulesError(Exception):
    """Base user-facing application error."""


class ConfigParsingError(GlobalRulesError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingConfigFileError(ConfigParsingError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Configuration file {path} not found")


class InvalidConfigFormatError(ConfigParsingError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to parse {CONFIG_FILENAME}: {detail}")


class MissingSourceDirSettingError(ConfigParsingError):
    def __init__(self) -> None:
        super().__init__(
            f"{SOURCE_DIR_FIELD} is not set or empty in {CONFIG_FILENAME}"
        )


class SourceDirNotFoundError(ConfigParsingError):
    def __init__(self, source_dir: str) -> None:
        self.source_dir = source_dir
        super().__init__(f"Global rules directory does not exist: {source_dir}")


def describe_exception(exc: BaseException, fallback: str) -> str:
    message = str(exc)
    return message if message else fallback
