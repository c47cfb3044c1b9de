from pathlib import Path
from typing import Optional, Protocol

from cursor_rules.config import ProvisionerConfig
from cursor_rules.errors import InvalidFrontmatterError
from cursor_rules.filesystem import (
    copy_file,
    ensure_dir,
    prune_dir_if_empty,
    prune_empty_parents,
    remove_file,
)
from cursor_rules.frontmatter import read_metadata
from cursor_rules.models import (
    ApplyResult,
    CleanResult,
    DirectoryOutcome,
    TemplateEntry,
    TemplateMetadata,
)
from cursor_rules.scanner import TemplateScanner


class ProvisionReporter(Protocol):
    def directory_ready(self, path: Path) -> None: ...

    def template_copied(self, entry: TemplateEntry, destination: Path) -> None: ...

    def template_removed(self, entry: TemplateEntry, destination: Path) -> None: ...

    def template_missing(self, entry: TemplateEntry, destination: Path) -> None: ...

    def directory_pruned(self, path: Path, outcome: DirectoryOutcome) -> None: ...


class NullReporter:
    def directory_ready(self, path: Path) -> None:
        pass

    def template_copied(self, entry: TemplateEntry, destination: Path) -> None:
        pass

    def template_removed(self, entry: TemplateEntry, destination: Path) -> None:
        pass

    def template_missing(self, entry: TemplateEntry, destination: Path) -> None:
        pass

    def directory_pruned(self, path: Path, outcome: DirectoryOutcome) -> None:
        pass


class TemplateProvisioner:
    """Copy bundled templates into a project and remove them again.

    Every operation re-scans the source roots, so results always reflect the
    templates currently installed. ``clean`` only ever deletes destination
    paths that mirror a scanned template; anything else in ``.cursor`` is left
    alone.
    """

    def __init__(
        self,
        config: ProvisionerConfig,
        reporter: Optional[ProvisionReporter] = None,
        scanner: Optional[TemplateScanner] = None,
    ) -> None:
        self._config = config
        self._reporter = reporter or NullReporter()
        self._scanner = scanner or TemplateScanner()

    @property
    def config(self) -> ProvisionerConfig:
        return self._config

    def source_path(self, entry: TemplateEntry) -> Path:
        category = self._config.for_category(entry.category)
        return category.source_root / entry.relative_path

    def destination_path(self, entry: TemplateEntry) -> Path:
        category = self._config.for_category(entry.category)
        return category.destination_root / entry.relative_path

    def list_templates(self) -> list[TemplateEntry]:
        return self._scanner.scan(self._config)

    def describe(self, entry: TemplateEntry) -> TemplateMetadata:
        """Best-effort metadata; unparseable templates get an empty description."""
        try:
            return read_metadata(self.source_path(entry))
        except InvalidFrontmatterError:
            return TemplateMetadata()

    def apply(self) -> ApplyResult:
        for category in self._config.categories:
            ensure_dir(category.destination_root)
            self._reporter.directory_ready(category.destination_root)

        result = ApplyResult()
        for entry in self.list_templates():
            destination = self.destination_path(entry)
            copy_file(self.source_path(entry), destination)
            result.copied[entry.category] += 1
            self._reporter.template_copied(entry, destination)
        return result

    def clean(self) -> CleanResult:
        entries = self.list_templates()
        result = CleanResult(scanned=len(entries))
        if not entries:
            return result

        for entry in entries:
            root = self._config.for_category(entry.category).destination_root
            destination = root / entry.relative_path
            if remove_file(destination):
                prune_empty_parents(destination, stop=root)
                result.removed += 1
                self._reporter.template_removed(entry, destination)
            else:
                result.not_found += 1
                self._reporter.template_missing(entry, destination)

        for category in self._config.categories:
            root = category.destination_root
            outcome = prune_dir_if_empty(root)
            if outcome == DirectoryOutcome.ABSENT:
                continue
            result.directories.append((root, outcome))
            self._reporter.directory_pruned(root, outcome)
        return result
