from typing import Final


PROJECT_FILENAME: Final[str] = "omod-project.json"
YAML_SUFFIXES: Final[tuple[str, ...]] = (".yaml", ".yml")

DEFAULT_RESOURCE_DIRECTORY: Final[str] = "src/main/resources"

DEFAULT_CONFIG_SOURCE: Final[str] = "src/main/resources"
DEFAULT_WEBAPP_SOURCE: Final[str] = "src/main/webapp"
DEFAULT_WEBAPP_TARGET: Final[str] = "web/module"
DEFAULT_CONFIG_FILE_PATH: Final[str] = "config.xml"

DEFAULT_DESCRIPTOR_DIRECTORY: Final[str] = "src/main/resources"
DEFAULT_DESCRIPTOR_PATTERN: Final[str] = "**/*.hbm.xml"
DEFAULT_DESCRIPTOR_PROPERTY: Final[str] = "hbmConfig"
DEFAULT_DESCRIPTOR_FORMAT: Final[str] = '<mapping resource="{0}" />'
DEFAULT_OMOD_DESCRIPTOR_PROPERTY: Final[str] = "omodHbmConfig"
DEFAULT_OMOD_DESCRIPTOR_FORMAT: Final[str] = "{0}"

DESCRIPTOR_LINE_TERMINATOR: Final[str] = "\n"

# Directories skipped by pattern groups that keep default excludes enabled.
DEFAULT_EXCLUDED_DIRS: Final[tuple[str, ...]] = (
    ".git",
    ".svn",
    ".hg",
    ".bzr",
    "CVS",
    "_darcs",
)
DEFAULT_EXCLUDED_FILES: Final[tuple[str, ...]] = (
    ".DS_Store",
    ".gitignore",
    ".cvsignore",
)

TEMPLATE_SAMPLE_FILENAME: Final[str] = "org/example/Sample.hbm.xml"
