from pathlib import Path


class ProvisionError(Exception):
    """Base user-facing application error."""


class ProvisionFileError(ProvisionError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class TemplateScanError(ProvisionFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Cannot scan templates ({detail})")


class TemplateCopyError(ProvisionFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Cannot write template ({detail})")


class TemplateRemoveError(ProvisionFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Cannot remove template ({detail})")


class InvalidFrontmatterError(ProvisionFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid frontmatter ({detail})")
