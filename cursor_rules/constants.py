from typing import Final


TOOL_NAME: Final[str] = "cursor-rules"
TOOL_VERSION: Final[str] = "1.0.0"

TEMPLATES_DIRNAME: Final[str] = "templates"
RULES_DIRNAME: Final[str] = "rules"
COMMANDS_DIRNAME: Final[str] = "commands"
CURSOR_DIRNAME: Final[str] = ".cursor"

RULES_PATTERN: Final[str] = "*.mdc"
COMMANDS_PATTERN: Final[str] = "*.md"
