from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

from omod_init.constants import (
    DEFAULT_CONFIG_FILE_PATH,
    DEFAULT_CONFIG_SOURCE,
    DEFAULT_DESCRIPTOR_DIRECTORY,
    DEFAULT_DESCRIPTOR_FORMAT,
    DEFAULT_DESCRIPTOR_PROPERTY,
    DEFAULT_OMOD_DESCRIPTOR_FORMAT,
    DEFAULT_OMOD_DESCRIPTOR_PROPERTY,
    DEFAULT_WEBAPP_SOURCE,
    DEFAULT_WEBAPP_TARGET,
)
from omod_init.models import FilePatternGroup


@dataclass(frozen=True)
class InitializerSettings:
    config_source: str = DEFAULT_CONFIG_SOURCE
    webapp_source: str = DEFAULT_WEBAPP_SOURCE
    webapp_target: str = DEFAULT_WEBAPP_TARGET
    config_file_path: str = DEFAULT_CONFIG_FILE_PATH
    descriptor_directory: str = DEFAULT_DESCRIPTOR_DIRECTORY
    descriptor_groups: Optional[tuple[FilePatternGroup, ...]] = None
    descriptor_property: str = DEFAULT_DESCRIPTOR_PROPERTY
    descriptor_format: str = DEFAULT_DESCRIPTOR_FORMAT
    omod_descriptor_property: str = DEFAULT_OMOD_DESCRIPTOR_PROPERTY
    omod_descriptor_format: str = DEFAULT_OMOD_DESCRIPTOR_FORMAT

    @classmethod
    def scalar_keys(cls) -> tuple[str, ...]:
        return tuple(item.name for item in fields(cls) if item.name != "descriptor_groups")

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "InitializerSettings":
        values: dict[str, Any] = {
            key: str(payload[key])
            for key in cls.scalar_keys()
            if payload.get(key) is not None
        }
        groups = payload.get("descriptor_groups")
        if groups is not None:
            values["descriptor_groups"] = tuple(
                FilePatternGroup.from_dict(item) for item in groups
            )
        return cls(**values)

    def with_overrides(self, overrides: Mapping[str, str]) -> "InitializerSettings":
        unknown = sorted(set(overrides) - set(self.scalar_keys()))
        if unknown:
            raise ValueError(f"Unknown setting: {', '.join(unknown)}")
        return replace(self, **dict(overrides))

