from global_rules.tui.renderers import RulesConsoleUI

__all__ = ["RulesConsoleUI"]
