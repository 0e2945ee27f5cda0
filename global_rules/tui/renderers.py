from rich.console import Console

from global_rules.models import GlobalRulesConfig, SyncFailure, SyncRequest, SyncResult
from global_rules.tui.enums import UIStyle
from global_rules.tui.sections import UISection
from global_rules.tui.tables import ConfigTable, ResultTable
from global_rules.utils import compact_home_path, compact_home_paths_in_text


class RulesConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_result(self, request: SyncRequest, result: SyncResult) -> None:
        style = UISection.outcome_style(result.success)
        self.console.print(
            UISection.wrap(
                f"{request.direction.value} global rules",
                ResultTable.summary_block(request, result),
                style=style,
            )
        )
        if isinstance(result, SyncFailure):
            self.console.print(
                UISection.wrap(
                    "errors",
                    ResultTable.errors_table(result.errors),
                    style=UIStyle.RED.value,
                )
            )

    def render_config(self, config: GlobalRulesConfig, saved: bool = False) -> None:
        self.console.print(
            UISection.wrap(
                "config saved" if saved else "config",
                ConfigTable.config_block(config),
                style=UIStyle.GREEN.value if saved else UIStyle.BLUE.value,
            )
        )

    def render_config_error(self, path: str, message: str) -> None:
        self.console.print(
            UISection.note(
                "config error",
                f"{compact_home_paths_in_text(message)}\n"
                f"[{UIStyle.DIM.value}]{compact_home_path(path)}[/{UIStyle.DIM.value}]",
                style=UIStyle.YELLOW.value,
            )
        )
