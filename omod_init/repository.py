"""Load and persist the module project descriptor."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import yaml
from jsonschema import Draft202012Validator

from omod_init.constants import PROJECT_FILENAME, YAML_SUFFIXES
from omod_init.errors import (
    InvalidJsonFormatError,
    InvalidProjectSchemaError,
    InvalidYamlFormatError,
    MissingProjectDirectoryError,
)
from omod_init.models import ProjectModel, ResourceRule
from omod_init.settings import InitializerSettings
from omod_init.utils import backup_file, read_json, read_yaml, write_json, write_yaml

_STRING_LIST = {"type": "array", "items": {"type": "string"}}

PROJECT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "resources": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["directory"],
                "properties": {
                    "directory": {"type": "string", "minLength": 1},
                    "filtering": {"type": "boolean"},
                    "includes": _STRING_LIST,
                    "excludes": _STRING_LIST,
                    "target_path": {"type": ["string", "null"]},
                },
                "additionalProperties": False,
            },
        },
        "properties": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
        "initializer": {
            "type": "object",
            "properties": {
                **{
                    key: {"type": "string"}
                    for key in InitializerSettings.scalar_keys()
                },
                "descriptor_groups": {
                    "type": ["array", "null"],
                    "items": {
                        "type": "object",
                        "required": ["directory", "includes"],
                        "properties": {
                            "directory": {"type": "string", "minLength": 1},
                            "includes": _STRING_LIST,
                            "excludes": _STRING_LIST,
                            "use_default_excludes": {"type": "boolean"},
                        },
                        "additionalProperties": False,
                    },
                },
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": True,
}

_VALIDATOR = Draft202012Validator(PROJECT_SCHEMA)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


class ProjectRepository:
    def __init__(self, root: Path, filename: str = PROJECT_FILENAME) -> None:
        self._root = root
        self._filename = filename

    @property
    def root(self) -> Path:
        return self._root

    @property
    def project_path(self) -> Path:
        return self.root / self._filename

    @property
    def is_yaml(self) -> bool:
        return self.project_path.suffix.lower() in YAML_SUFFIXES

    def exists(self) -> bool:
        return self.project_path.exists()

    def load_payload(self) -> dict[str, Any]:
        if not self.root.is_dir():
            raise MissingProjectDirectoryError(self.root)
        path = self.project_path
        if not path.exists() or path.stat().st_size == 0:
            return {}

        if self.is_yaml:
            try:
                payload = read_yaml(path)
            except yaml.YAMLError as exc:
                raise InvalidYamlFormatError(path, str(exc)) from exc
        else:
            try:
                payload = read_json(path)
            except json.JSONDecodeError as exc:
                raise InvalidJsonFormatError(path, exc.msg) from exc

        if payload is None:
            return {}
        self.validate(payload)
        return payload

    def validate(self, payload: Any) -> None:
        if not isinstance(payload, dict):
            raise InvalidProjectSchemaError(self.project_path, "must be an object")
        error = next(iter(_VALIDATOR.iter_errors(payload)), None)
        if error is not None:
            raise InvalidProjectSchemaError(
                self.project_path, format_schema_error(error)
            )

    def load(self) -> tuple[ProjectModel, InitializerSettings]:
        payload = self.load_payload()
        project = ProjectModel(basedir=self.root.resolve())
        if "resources" in payload:
            project.resources = [
                ResourceRule.from_dict(item) for item in payload["resources"]
            ]
        project.properties = dict(payload.get("properties", {}))
        settings = InitializerSettings.from_dict(payload.get("initializer", {}))
        return project, settings

    def save(self, project: ProjectModel, backup: bool = False) -> Optional[Path]:
        """Write resources and properties back, keeping every other key."""
        payload = self.load_payload()
        backup_path = None
        if backup and self.exists():
            backup_path = backup_file(self.project_path)

        payload["resources"] = [resource.as_dict() for resource in project.resources]
        payload["properties"] = dict(project.properties)

        if self.is_yaml:
            write_yaml(self.project_path, payload)
        else:
            write_json(self.project_path, payload)
        return backup_path
