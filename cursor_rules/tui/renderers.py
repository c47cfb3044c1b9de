from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from cursor_rules.config import ProvisionerConfig
from cursor_rules.constants import TOOL_NAME
from cursor_rules.models import (
    ApplyResult,
    CleanResult,
    DirectoryOutcome,
    TemplateCategory,
    TemplateEntry,
    TemplateMetadata,
)
from cursor_rules.tui.enums import (
    CATEGORY_STYLE,
    DIRECTORY_OUTCOME_STYLE,
    ProvisionStyle,
)
from cursor_rules.tui.tables import SummaryTable, TemplateTable


BANNER_COMMANDS = (
    ("apply", "Copy all templates into .cursor/ (alias: copy)"),
    ("list", "List available templates"),
    ("clean", "Remove copied templates, keeping other files"),
)


class ProvisionConsoleUI:
    """Console output for the provisioning commands.

    Doubles as the progress reporter passed to ``TemplateProvisioner`` so
    per-file lines are printed while the work happens.
    """

    def __init__(
        self,
        config: ProvisionerConfig,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ) -> None:
        self.config = config
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    @staticmethod
    def _styled(style: ProvisionStyle, text: str) -> str:
        return f"[{style.value}]{text}[/{style.value}]"

    def _display(self, path: Path) -> str:
        return escape(self.config.display_path(path))

    def _category_tag(self, category: TemplateCategory) -> str:
        style = CATEGORY_STYLE.get(category, ProvisionStyle.PLAIN.value)
        return f"[{style}]{category.value}[/{style}]"

    def _entry_line(
        self, label: str, style: ProvisionStyle, entry: TemplateEntry
    ) -> str:
        return f"  {self._styled(style, label)} {escape(entry.display_path)}"

    def render_banner(self) -> None:
        lines = ["Available commands:"]
        lines.extend(
            f"  [bold]{name:<7}[/bold] {text}" for name, text in BANNER_COMMANDS
        )
        lines.append("")
        lines.append(f"Use [bold]{TOOL_NAME} --help[/bold] for more information.")
        self.console.print(
            Panel(
                "\n".join(lines),
                title=TOOL_NAME,
                border_style=ProvisionStyle.KEPT.value,
                padding=(0, 1),
            )
        )

    def render_header(self, title: str) -> None:
        self.console.print(self._styled(ProvisionStyle.HEADING, title))

    def render_empty(self, message: str) -> None:
        self.console.print(self._styled(ProvisionStyle.NOTICE, message))

    def render_error(self, marker: str, exc: Exception) -> None:
        self.error_console.print(
            f"{self._styled(ProvisionStyle.FAILURE, marker + ':')} {escape(str(exc))}",
            soft_wrap=True,
        )

    def directory_ready(self, path: Path) -> None:
        label = self._styled(ProvisionStyle.DONE, "Directory ready:")
        self.console.print(f"{label} {self._display(path)}")

    def template_copied(self, entry: TemplateEntry, destination: Path) -> None:
        target = self._display(destination.parent)
        self.console.print(
            f"{self._entry_line('Copied:', ProvisionStyle.DONE, entry)} "
            f"({self._category_tag(entry.category)} -> {target})"
        )

    def template_removed(self, entry: TemplateEntry, destination: Path) -> None:
        root = self.config.for_category(entry.category).destination_root
        self.console.print(
            f"{self._entry_line('Removed:', ProvisionStyle.DONE, entry)} "
            f"({self._category_tag(entry.category)}, from {self._display(root)})"
        )

    def template_missing(self, entry: TemplateEntry, destination: Path) -> None:
        self.console.print(
            f"{self._entry_line('Not found:', ProvisionStyle.SKIPPED, entry)} "
            f"({self._category_tag(entry.category)})"
        )

    def directory_pruned(self, path: Path, outcome: DirectoryOutcome) -> None:
        style = DIRECTORY_OUTCOME_STYLE.get(outcome, ProvisionStyle.PLAIN.value)
        if outcome == DirectoryOutcome.REMOVED:
            message = f"Removed empty directory: {self._display(path)}"
        else:
            message = f"Directory {self._display(path)} kept (contains other files)"
        self.console.print(f"[{style}]{message}[/{style}]")

    def render_template_list(
        self, rows: list[tuple[TemplateEntry, TemplateMetadata]]
    ) -> None:
        self.console.print(
            Panel(
                TemplateTable.list_table(rows),
                title="available templates",
                subtitle=f"{len(rows)} total",
                border_style=ProvisionStyle.KEPT.value,
                padding=(0, 1),
            )
        )

    def render_apply_result(self, result: ApplyResult) -> None:
        stats = {
            "rules": (
                f"{result.copied[TemplateCategory.RULES]} files to "
                f"{self.config.display_path(self.config.rules.destination_root)}/"
            ),
            "commands": (
                f"{result.copied[TemplateCategory.COMMANDS]} files to "
                f"{self.config.display_path(self.config.commands.destination_root)}/"
            ),
            "total": str(result.total),
        }
        self.console.print(SummaryTable.stats_panel("apply", stats))

    def render_clean_result(self, result: CleanResult) -> None:
        stats = {
            "removed": f"{result.removed} files",
            "not found": f"{result.not_found} files",
        }
        self.console.print(SummaryTable.stats_panel("clean", stats))
