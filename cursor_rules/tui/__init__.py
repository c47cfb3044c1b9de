from cursor_rules.tui.renderers import ProvisionConsoleUI

__all__ = ["ProvisionConsoleUI"]
