from rich.table import Column, Table

from global_rules.models import (
    GlobalRulesConfig,
    OperationError,
    SyncFailure,
    SyncRequest,
    SyncResult,
)
from global_rules.tui.enums import ERROR_TYPE_STYLE, UIStyle
from global_rules.tui.sections import UISection
from global_rules.utils import (
    compact_home_path,
    compact_home_paths_in_text,
    project_rules_dir,
)


class ResultTable:
    @staticmethod
    def summary_block(request: SyncRequest, result: SyncResult) -> Table:
        errors = len(result.errors) if isinstance(result, SyncFailure) else 0

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", request.direction.value)
        table.add_row("Project rules", compact_home_path(project_rules_dir(request.project_dir)))
        table.add_row("Result", UISection.outcome_label(result.success))
        table.add_row("Errors", str(errors))
        return table

    @staticmethod
    def errors_table(errors: tuple[OperationError, ...]) -> Table:
        table = Table(
            Column(header="Type", width=22),
            Column(header="Message", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for error in errors:
            style = ERROR_TYPE_STYLE.get(error.type, UIStyle.WHITE.value)
            table.add_row(
                f"[{style}]{error.type.value}[/{style}]",
                compact_home_paths_in_text(error.message),
            )
        return table


class ConfigTable:
    @staticmethod
    def config_block(config: GlobalRulesConfig) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Config file", compact_home_path(config.config_path))
        for key, value in config.as_dict().items():
            table.add_row(key, compact_home_path(value))
        return table
