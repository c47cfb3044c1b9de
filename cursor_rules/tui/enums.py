from enum import Enum

from cursor_rules.models import DirectoryOutcome, TemplateCategory


class ProvisionStyle(str, Enum):
    """rich styles keyed by what a line reports, not by color."""

    HEADING = "bold blue"
    DONE = "green"
    SKIPPED = "dim"
    NOTICE = "yellow"
    FAILURE = "bold red"
    RULES = "cyan"
    COMMANDS = "magenta"
    KEPT = "blue"
    PLAIN = "white"


CATEGORY_STYLE = {
    TemplateCategory.RULES: ProvisionStyle.RULES.value,
    TemplateCategory.COMMANDS: ProvisionStyle.COMMANDS.value,
}

DIRECTORY_OUTCOME_STYLE = {
    DirectoryOutcome.REMOVED: ProvisionStyle.DONE.value,
    DirectoryOutcome.KEPT: ProvisionStyle.KEPT.value,
    DirectoryOutcome.ABSENT: ProvisionStyle.SKIPPED.value,
}
