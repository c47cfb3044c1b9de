from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class TemplateCategory(str, Enum):
    RULES = "rules"
    COMMANDS = "commands"


class DirectoryOutcome(str, Enum):
    REMOVED = "removed"
    KEPT = "kept"
    ABSENT = "absent"


@dataclass(frozen=True)
class TemplateEntry:
    relative_path: Path
    category: TemplateCategory

    @property
    def display_path(self) -> str:
        return self.relative_path.as_posix()


@dataclass(frozen=True)
class TemplateMetadata:
    description: str = ""
    globs: list[str] = field(default_factory=list)
    always_apply: bool = False


@dataclass
class ApplyResult:
    copied: dict[TemplateCategory, int] = field(
        default_factory=lambda: {category: 0 for category in TemplateCategory}
    )

    @property
    def total(self) -> int:
        return sum(self.copied.values())


@dataclass
class CleanResult:
    scanned: int = 0
    removed: int = 0
    not_found: int = 0
    directories: list[tuple[Path, DirectoryOutcome]] = field(default_factory=list)
