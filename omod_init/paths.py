import logging
from pathlib import Path
from typing import Iterable, Optional

from omod_init.errors import PathResolutionError
from omod_init.models import ResourceRule

logger = logging.getLogger("omod_init.paths")


def canonicalize(path: Path | str, base: Optional[Path] = None) -> Path:
    """Return the absolute, symlink-free identity of ``path``.

    Relative paths are anchored at ``base`` (the project directory) when given,
    otherwise at the current working directory. Paths that do not exist are
    still normalized lexically.
    """
    candidate = Path(path)
    if not candidate.is_absolute() and base is not None:
        candidate = Path(base) / candidate
    try:
        return candidate.resolve()
    except (OSError, RuntimeError, ValueError) as exc:
        raise PathResolutionError(path, str(exc)) from exc


def same_path(left: Path | str, right: Path | str, base: Optional[Path] = None) -> bool:
    canon_left = canonicalize(left, base)
    canon_right = canonicalize(right, base)
    logger.debug("matching %s ~ %s", canon_left, canon_right)
    return canon_left == canon_right


def resources_by_path(
    resources: Iterable[ResourceRule], path: Path | str, base: Optional[Path] = None
) -> list[ResourceRule]:
    return [
        resource
        for resource in resources
        if same_path(path, resource.directory, base)
    ]


def resource_by_path(
    resources: Iterable[ResourceRule], path: Path | str, base: Optional[Path] = None
) -> Optional[ResourceRule]:
    for resource in resources:
        if same_path(path, resource.directory, base):
            return resource
    return None
