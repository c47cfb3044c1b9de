import sys
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    root = tmp_path / "bundle"
    (root / "rules").mkdir(parents=True)
    (root / "commands").mkdir(parents=True)
    return root


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def write_file():
    def _write(path: Path, content: str = "content\n") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_bundle(templates_root: Path, write_file) -> Path:
    write_file(
        templates_root / "rules" / "readme-data-model.mdc",
        "---\ndescription: Data model docs\nalwaysApply: false\n---\n"
        "\nKeep it synced.\n",
    )
    write_file(templates_root / "rules" / "nested" / "sub.mdc", "Nested rule\n")
    write_file(
        templates_root / "commands" / "review.md", "# Review changes\n\nSteps.\n"
    )
    return templates_root


@pytest.fixture
def config(project_root: Path, templates_root: Path):
    from cursor_rules.config import ProvisionerConfig

    return ProvisionerConfig.build(project_root, templates_root)


@pytest.fixture
def cli_runner(project_root: Path, templates_root: Path) -> CliRunner:
    class ProjectCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            base = [
                "--project-dir",
                str(project_root),
                "--templates-dir",
                str(templates_root),
            ]
            return super().invoke(cli, args=base + list(args or []), **kwargs)

    return ProjectCliRunner()
