import os
from fnmatch import fnmatchcase
from pathlib import Path

from cursor_rules.config import CategoryConfig, ProvisionerConfig
from cursor_rules.errors import TemplateScanError
from cursor_rules.models import TemplateEntry


class TemplateScanner:
    """Enumerate bundled templates fresh on every call.

    A missing source root is an empty category. A root that exists but cannot
    be walked raises ``TemplateScanError``.
    """

    def scan(self, config: ProvisionerConfig) -> list[TemplateEntry]:
        entries: list[TemplateEntry] = []
        for category in config.categories:
            entries.extend(self.scan_category(category))
        return entries

    def scan_category(self, category: CategoryConfig) -> list[TemplateEntry]:
        root = category.source_root
        if not root.exists():
            return []
        if not root.is_dir():
            raise TemplateScanError(root, "not a directory")

        def _raise(exc: OSError) -> None:
            detail = exc.strerror or str(exc)
            raise TemplateScanError(Path(exc.filename or root), detail)

        matches: list[Path] = []
        for current, dir_names, file_names in os.walk(str(root), onerror=_raise):
            dir_names[:] = sorted(
                name for name in dir_names if not name.startswith(".")
            )
            current_path = Path(current)
            for name in file_names:
                if name.startswith("."):
                    continue
                if fnmatchcase(name, category.pattern):
                    matches.append((current_path / name).relative_to(root))

        return [
            TemplateEntry(relative_path=path, category=category.category)
            for path in sorted(matches, key=lambda item: item.as_posix())
        ]
