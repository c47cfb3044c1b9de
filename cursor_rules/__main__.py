from pathlib import Path
from typing import Optional

import click

from cursor_rules.config import ProvisionerConfig
from cursor_rules.constants import TOOL_NAME, TOOL_VERSION
from cursor_rules.errors import ProvisionError
from cursor_rules.provisioner import TemplateProvisioner
from cursor_rules.tui import ProvisionConsoleUI


COMMAND_ALIASES = {
    "copy": "apply",
}


class AliasedGroup(click.Group):
    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, COMMAND_ALIASES.get(cmd_name, cmd_name))

    def resolve_command(self, ctx: click.Context, args: list[str]):
        _, command, remaining = super().resolve_command(ctx, args)
        return command.name if command else None, command, remaining


def _session(ctx: click.Context) -> tuple[TemplateProvisioner, ProvisionConsoleUI]:
    config: ProvisionerConfig = ctx.obj
    ui = ProvisionConsoleUI(config)
    return TemplateProvisioner(config, reporter=ui), ui


@click.group(
    cls=AliasedGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--project-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project whose .cursor/ directory is managed (default: current directory).",
)
@click.option(
    "--templates-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Template bundle with rules/ and commands/ (default: bundled templates).",
)
@click.version_option(TOOL_VERSION, prog_name=TOOL_NAME)
@click.pass_context
def cli(
    ctx: click.Context, project_dir: Optional[Path], templates_dir: Optional[Path]
) -> None:
    """Copy Cursor rule and command templates into a project."""
    project_root = (project_dir or Path.cwd()).expanduser().resolve()
    templates_root = templates_dir.expanduser().resolve() if templates_dir else None
    ctx.obj = ProvisionerConfig.build(project_root, templates_root)

    if ctx.invoked_subcommand is None:
        ProvisionConsoleUI(ctx.obj).render_banner()


@cli.command(help="Copy all templates into .cursor/rules and .cursor/commands.")
@click.pass_context
def apply(ctx: click.Context) -> None:
    provisioner, ui = _session(ctx)
    ui.render_header("Applying Cursor templates")
    try:
        result = provisioner.apply()
    except (ProvisionError, OSError) as exc:
        ui.render_error("Error copying templates", exc)
        raise click.exceptions.Exit(1)

    if result.total == 0:
        ui.render_empty("No template files found.")
        return
    ui.render_apply_result(result)


@cli.command("list", help="List available templates.")
@click.pass_context
def list_templates(ctx: click.Context) -> None:
    provisioner, ui = _session(ctx)
    try:
        rows = [
            (entry, provisioner.describe(entry))
            for entry in provisioner.list_templates()
        ]
    except (ProvisionError, OSError) as exc:
        ui.render_error("Error listing templates", exc)
        raise click.exceptions.Exit(1)

    if not rows:
        ui.render_empty("No template files found.")
        return
    ui.render_template_list(rows)


@cli.command(help="Remove copied templates, keeping any other files.")
@click.pass_context
def clean(ctx: click.Context) -> None:
    provisioner, ui = _session(ctx)
    ui.render_header("Cleaning Cursor templates")
    try:
        result = provisioner.clean()
    except (ProvisionError, OSError) as exc:
        ui.render_error("Error cleaning templates", exc)
        raise click.exceptions.Exit(1)

    if result.scanned == 0:
        ui.render_empty("No template files found to clean.")
        return
    ui.render_clean_result(result)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.exceptions.Abort:
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
