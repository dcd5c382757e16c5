from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from omod_init.constants import DEFAULT_RESOURCE_DIRECTORY


class ActionKind(str, Enum):
    ADD_RESOURCE = "add_resource"
    SET_PROPERTY = "set_property"


class ActionStatus(str, Enum):
    NOOP = "noop"
    CREATE = "create"
    UPDATE = "update"
    SKIP = "skip"
    ABSENT = "absent"


@dataclass
class ResourceRule:
    directory: str
    filtering: bool = False
    includes: list[str] = field(default_factory=list)
    excludes: list[str] = field(default_factory=list)
    target_path: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "ResourceRule":
        return cls(
            directory=str(payload["directory"]),
            filtering=bool(payload.get("filtering", False)),
            includes=[str(item) for item in payload.get("includes") or []],
            excludes=[str(item) for item in payload.get("excludes") or []],
            target_path=payload.get("target_path"),
        )

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "directory": self.directory,
            "filtering": self.filtering,
        }
        if self.includes:
            payload["includes"] = list(self.includes)
        if self.excludes:
            payload["excludes"] = list(self.excludes)
        if self.target_path is not None:
            payload["target_path"] = self.target_path
        return payload


@dataclass(frozen=True)
class FilePatternGroup:
    directory: str
    includes: tuple[str, ...]
    excludes: tuple[str, ...] = ()
    use_default_excludes: bool = True

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "FilePatternGroup":
        return cls(
            directory=str(payload["directory"]),
            includes=tuple(str(item) for item in payload.get("includes") or []),
            excludes=tuple(str(item) for item in payload.get("excludes") or []),
            use_default_excludes=bool(payload.get("use_default_excludes", True)),
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "directory": self.directory,
            "includes": list(self.includes),
            "excludes": list(self.excludes),
            "use_default_excludes": self.use_default_excludes,
        }


def default_resources() -> list[ResourceRule]:
    return [ResourceRule(directory=DEFAULT_RESOURCE_DIRECTORY)]


@dataclass
class ProjectModel:
    """Mutable project state shared with the initializer for one run.

    A project that never declared resources carries the build's implicit
    default resource directory, the same way a freshly generated module
    project does.
    """

    basedir: Path
    resources: list[ResourceRule] = field(default_factory=default_resources)
    properties: dict[str, str] = field(default_factory=dict)

    def add_resource(self, resource: ResourceRule) -> None:
        self.resources.append(resource)

    def set_property(self, key: str, value: str) -> None:
        self.properties[key] = value


@dataclass(frozen=True)
class InitAction:
    kind: ActionKind
    target: str
    status: ActionStatus
    detail: str


@dataclass
class InitReport:
    actions: list[InitAction] = field(default_factory=list)
    descriptors: list[str] = field(default_factory=list)

    def record(
        self, kind: ActionKind, target: str, status: ActionStatus, detail: str
    ) -> InitAction:
        action = InitAction(kind=kind, target=target, status=status, detail=detail)
        self.actions.append(action)
        return action

    def has_changes(self) -> bool:
        return any(
            action.status in (ActionStatus.CREATE, ActionStatus.UPDATE)
            for action in self.actions
        )

    def summary(self) -> dict[str, int]:
        counts = {status.value: 0 for status in ActionStatus}
        for action in self.actions:
            counts[action.status.value] += 1
        counts["actions"] = len(self.actions)
        counts["descriptors"] = len(self.descriptors)
        return counts
