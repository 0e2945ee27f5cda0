"""MCP server exposing the global rules load/save tools over stdio.

Usage:
    global-rules serve
    python -m global_rules.server
"""

from __future__ import annotations

import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from global_rules.config import ConfigRepository
from global_rules.constants import LOAD_TOOL_NAME, SAVE_TOOL_NAME, SERVER_NAME
from global_rules.logs import setup_logging
from global_rules.models import SyncResult
from global_rules.service import GlobalRulesService, failure_from_exception
from global_rules.utils import dump_result

logger = logging.getLogger(__name__)

LOAD_DESCRIPTION = 'Load global rules ("g-*.mdc") to target project'
SAVE_DESCRIPTION = 'Save global rules ("g-*.mdc") from target project to global storage'


def render_result(result: SyncResult) -> str:
    return dump_result(result.as_dict())


def handle_load_global_rules(service: GlobalRulesService, path: str) -> str:
    try:
        result = service.load_global_rules(path)
    except Exception as exc:
        logger.warning("%s failed: %s", LOAD_TOOL_NAME, exc)
        result = failure_from_exception(exc)
    return render_result(result)


def handle_save_global_rules(service: GlobalRulesService, path: str) -> str:
    try:
        result = service.save_global_rules(path)
    except Exception as exc:
        logger.warning("%s failed: %s", SAVE_TOOL_NAME, exc)
        result = failure_from_exception(exc)
    return render_result(result)


def create_server(config_path: Path | None = None) -> FastMCP:
    service = GlobalRulesService(config_repository=ConfigRepository(config_path))
    server = FastMCP(SERVER_NAME)

    @server.tool(name=LOAD_TOOL_NAME, description=LOAD_DESCRIPTION)
    def load_global_rules(path: str) -> str:
        """
        Args:
            path: Absolute path to target project directory that contains .cursor/rules
        """
        return handle_load_global_rules(service, path)

    @server.tool(name=SAVE_TOOL_NAME, description=SAVE_DESCRIPTION)
    def save_global_rules(path: str) -> str:
        """
        Args:
            path: Absolute path to source project directory that contains .cursor/rules
        """
        return handle_save_global_rules(service, path)

    return server


def run_server(config_path: Path | None = None) -> None:
    server = create_server(config_path)
    logger.info("Global Rules MCP server running on stdio")
    server.run()


def main() -> None:
    setup_logging()
    run_server()


if __name__ == "__main__":
    main()
