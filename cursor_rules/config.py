"""Immutable provisioning configuration built once per invocation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cursor_rules.constants import (
    COMMANDS_DIRNAME,
    COMMANDS_PATTERN,
    CURSOR_DIRNAME,
    RULES_DIRNAME,
    RULES_PATTERN,
    TEMPLATES_DIRNAME,
)
from cursor_rules.models import TemplateCategory


def bundled_templates_root() -> Path:
    return Path(__file__).resolve().parent / TEMPLATES_DIRNAME


@dataclass(frozen=True)
class CategoryConfig:
    category: TemplateCategory
    source_root: Path
    destination_root: Path
    pattern: str


@dataclass(frozen=True)
class ProvisionerConfig:
    project_root: Path
    rules: CategoryConfig
    commands: CategoryConfig

    @classmethod
    def build(
        cls, project_root: Path, templates_root: Optional[Path] = None
    ) -> ProvisionerConfig:
        templates = templates_root or bundled_templates_root()
        cursor_dir = project_root / CURSOR_DIRNAME
        return cls(
            project_root=project_root,
            rules=CategoryConfig(
                category=TemplateCategory.RULES,
                source_root=templates / RULES_DIRNAME,
                destination_root=cursor_dir / RULES_DIRNAME,
                pattern=RULES_PATTERN,
            ),
            commands=CategoryConfig(
                category=TemplateCategory.COMMANDS,
                source_root=templates / COMMANDS_DIRNAME,
                destination_root=cursor_dir / COMMANDS_DIRNAME,
                pattern=COMMANDS_PATTERN,
            ),
        )

    @property
    def categories(self) -> tuple[CategoryConfig, CategoryConfig]:
        return (self.rules, self.commands)

    def for_category(self, category: TemplateCategory) -> CategoryConfig:
        if category == TemplateCategory.RULES:
            return self.rules
        return self.commands

    def display_path(self, path: Path) -> str:
        try:
            return path.relative_to(self.project_root).as_posix()
        except ValueError:
            return str(path)
