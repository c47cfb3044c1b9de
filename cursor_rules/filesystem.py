import shutil
from pathlib import Path

from cursor_rules.errors import TemplateCopyError, TemplateRemoveError
from cursor_rules.models import DirectoryOutcome


def _detail(exc: OSError) -> str:
    return exc.strerror or str(exc)


def ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise TemplateCopyError(path, _detail(exc)) from exc


def copy_file(source: Path, target: Path) -> None:
    ensure_dir(target.parent)
    if target.is_dir() and not target.is_symlink():
        raise TemplateCopyError(target, "destination is a directory")
    try:
        # Unlink first: read-only copies must still be replaced.
        if target.is_symlink() or target.is_file():
            target.unlink()
        shutil.copy2(source, target)
    except OSError as exc:
        raise TemplateCopyError(target, _detail(exc)) from exc


def remove_file(path: Path) -> bool:
    try:
        if not (path.is_symlink() or path.exists()):
            return False
        path.unlink()
    except OSError as exc:
        raise TemplateRemoveError(path, _detail(exc)) from exc
    return True


def prune_dir_if_empty(path: Path) -> DirectoryOutcome:
    try:
        if not path.exists():
            return DirectoryOutcome.ABSENT
        if any(path.iterdir()):
            return DirectoryOutcome.KEPT
        path.rmdir()
    except OSError as exc:
        raise TemplateRemoveError(path, _detail(exc)) from exc
    return DirectoryOutcome.REMOVED


def prune_empty_parents(path: Path, stop: Path) -> None:
    """Remove empty directories from ``path.parent`` up to, not including, ``stop``."""
    current = path.parent
    try:
        while current != stop and stop in current.parents:
            if not current.is_dir() or any(current.iterdir()):
                return
            current.rmdir()
            current = current.parent
    except OSError as exc:
        raise TemplateRemoveError(current, _detail(exc)) from exc
