"""Copy bundled Cursor rule and command templates into a project."""

from cursor_rules.constants import TOOL_VERSION

__version__ = TOOL_VERSION
