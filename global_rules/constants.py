from typing import Final


SERVER_NAME: Final[str] = "global-rules-server"

GLOBAL_RULE_PREFIX: Final[str] = "g-"

CURSOR_DIRNAME: Final[str] = ".cursor"
RULES_DIRNAME: Final[str] = "rules"

CONFIG_FILENAME: Final[str] = "config.json"
SOURCE_DIR_FIELD: Final[str] = "globalRulesSourceDir"

LOAD_TOOL_NAME: Final[str] = "loadGlobalRules"
SAVE_TOOL_NAME: Final[str] = "saveGlobalRules"

UNKNOWN_ERROR_MESSAGE: Final[str] = "Unknown error"

CONFIG_SCHEMA: Final[dict] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        SOURCE_DIR_FIELD: {"type": ["string", "null"]},
    },
}
