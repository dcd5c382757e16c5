from pathlib import Path


class ModuleInitError(Exception):
    """Base user-facing application error."""


class PathResolutionError(ModuleInitError):
    def __init__(self, path: Path | str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to construct paths ({detail}): {path}")


class InvalidFormatTemplateError(ModuleInitError):
    def __init__(self, template: str, detail: str) -> None:
        self.template = template
        self.detail = detail
        super().__init__(f"Invalid descriptor format ({detail}): {template!r}")


class ProjectFileError(ModuleInitError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingProjectDirectoryError(ProjectFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing project directory")


class InvalidJsonFormatError(ProjectFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidYamlFormatError(ProjectFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid YAML format ({detail})")


class InvalidProjectSchemaError(ProjectFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid project schema ({detail})")


class InvalidPatternError(ModuleInitError):
    def __init__(self, pattern: str, detail: str) -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"Invalid file pattern ({detail}): {pattern!r}")
