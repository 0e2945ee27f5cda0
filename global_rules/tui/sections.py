from typing import Optional

from rich.panel import Panel

from global_rules.tui.enums import UIStyle


class UISection:
    @staticmethod
    def outcome_style(success: bool) -> str:
        return UIStyle.GREEN.value if success else UIStyle.RED.value

    @staticmethod
    def outcome_label(success: bool) -> str:
        style = UISection.outcome_style(success)
        label = "success" if success else "failed"
        return f"[{style}]{label}[/{style}]"

    @staticmethod
    def wrap(
        title: str,
        body,
        style: str = UIStyle.BLUE.value,
        subtitle: Optional[str] = None,
    ) -> Panel:
        return Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))

    @staticmethod
    def note(title: str, body: str, style: str) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1))
