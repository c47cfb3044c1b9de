from rich.markup import escape
from rich.panel import Panel
from rich.table import Column, Table

from cursor_rules.models import TemplateEntry, TemplateMetadata
from cursor_rules.tui.enums import CATEGORY_STYLE, ProvisionStyle


class TemplateTable:
    @staticmethod
    def list_table(rows: list[tuple[TemplateEntry, TemplateMetadata]]) -> Table:
        table = Table(
            Column(header="#", width=4, justify="right"),
            Column(header="Template", overflow="fold"),
            Column(header="Category", width=10),
            Column(header="Description", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for index, (entry, metadata) in enumerate(rows, start=1):
            style = CATEGORY_STYLE.get(entry.category, ProvisionStyle.PLAIN.value)
            table.add_row(
                str(index),
                escape(entry.display_path),
                f"[{style}]{entry.category.value}[/{style}]",
                escape(metadata.description),
            )
        return table


class SummaryTable:
    @staticmethod
    def stats_panel(title: str, stats: dict[str, str], ok: bool = True) -> Panel:
        table = Table(show_header=False, box=None)
        for key, value in stats.items():
            table.add_row(f"[bold]{key}[/bold]", escape(value))
        style = ProvisionStyle.DONE if ok else ProvisionStyle.NOTICE
        return Panel(table, title=title, border_style=style.value)
