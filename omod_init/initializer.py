"""Auto-configure resources and descriptor properties for a module project.

Everything here can be achieved by declaring resources and properties by
hand. The initializer only fills in conventional defaults, and steps aside
as soon as it sees that a directory has already been configured.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePath
from typing import Iterable, Optional

from omod_init.descriptors import (
    collect_descriptors,
    default_group,
    render_lines,
    validate_template,
)
from omod_init.models import (
    ActionKind,
    ActionStatus,
    FilePatternGroup,
    InitReport,
    ProjectModel,
    ResourceRule,
)
from omod_init.paths import resource_by_path, resources_by_path
from omod_init.settings import InitializerSettings

logger = logging.getLogger("omod_init.initializer")


class ModuleInitializer:
    def __init__(
        self,
        project: ProjectModel,
        settings: Optional[InitializerSettings] = None,
        report: Optional[InitReport] = None,
    ) -> None:
        self.project = project
        self.settings = settings or InitializerSettings()
        self.report = report if report is not None else InitReport()

    def _resolve(self, path: str) -> Path:
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.project.basedir / candidate

    def run(self) -> InitReport:
        logger.debug("initializing module project %s", self.project.basedir)
        settings = self.settings
        self.ensure_config_filtering(settings.config_source, settings.config_file_path)
        self.ensure_web_resource(settings.webapp_source, settings.webapp_target)
        self.build_descriptor_properties(
            groups=settings.descriptor_groups,
            property_name=settings.descriptor_property,
            property_format=settings.descriptor_format,
            omod_property_name=settings.omod_descriptor_property,
            omod_property_format=settings.omod_descriptor_format,
        )
        return self.report

    def ensure_config_filtering(self, config_source: str, config_file_path: str) -> None:
        logger.debug("ensuring config is filtered")
        if not self._resolve(config_source).exists():
            self.report.record(
                ActionKind.ADD_RESOURCE,
                config_source,
                ActionStatus.ABSENT,
                "config directory not found",
            )
            return

        existing = resources_by_path(
            self.project.resources, config_source, self.project.basedir
        )
        if not existing or any(resource.filtering for resource in existing):
            logger.debug("config dir manually configured, skipping")
            self.report.record(
                ActionKind.ADD_RESOURCE,
                config_source,
                ActionStatus.SKIP,
                "config directory manually configured",
            )
            return

        include = PurePath(config_file_path).name
        logger.debug("adding resource to filter config file %s", include)
        self.project.add_resource(
            ResourceRule(directory=config_source, filtering=True, includes=[include])
        )
        self.report.record(
            ActionKind.ADD_RESOURCE,
            config_source,
            ActionStatus.CREATE,
            f"filter {include}",
        )

    def ensure_web_resource(self, webapp_source: str, webapp_target: str) -> None:
        logger.debug("auto-detecting web sources")
        if not self._resolve(webapp_source).exists():
            self.report.record(
                ActionKind.ADD_RESOURCE,
                webapp_source,
                ActionStatus.ABSENT,
                "web directory not found",
            )
            return

        existing = resource_by_path(
            self.project.resources, webapp_source, self.project.basedir
        )
        if existing is not None:
            logger.debug("web resources already configured, skipping")
            self.report.record(
                ActionKind.ADD_RESOURCE,
                webapp_source,
                ActionStatus.SKIP,
                "web resources already configured",
            )
            return

        logger.debug("adding resource: %s", webapp_source)
        self.project.add_resource(
            ResourceRule(
                directory=webapp_source, filtering=False, target_path=webapp_target
            )
        )
        self.report.record(
            ActionKind.ADD_RESOURCE,
            webapp_source,
            ActionStatus.CREATE,
            f"copy to {webapp_target}",
        )

    def build_descriptor_properties(
        self,
        groups: Optional[Iterable[FilePatternGroup]] = None,
        property_name: Optional[str] = None,
        property_format: Optional[str] = None,
        omod_property_name: Optional[str] = None,
        omod_property_format: Optional[str] = None,
    ) -> tuple[str, str]:
        settings = self.settings
        property_name = property_name or settings.descriptor_property
        property_format = property_format or settings.descriptor_format
        omod_property_name = omod_property_name or settings.omod_descriptor_property
        omod_property_format = omod_property_format or settings.omod_descriptor_format

        logger.debug("building descriptor config properties")
        validate_template(property_format)
        validate_template(omod_property_format)

        if groups is None:
            logger.debug("configuring descriptor file set to default")
            groups = [default_group(settings.descriptor_directory)]

        filenames = sorted(collect_descriptors(groups, self.project.basedir))
        self.report.descriptors = filenames

        value = render_lines(property_format, filenames)
        omod_value = render_lines(omod_property_format, filenames)

        logger.debug("setting project descriptor properties")
        self._set_property(property_name, value)
        self._set_property(omod_property_name, omod_value)
        return value, omod_value

    def _set_property(self, key: str, value: str) -> None:
        previous = self.project.properties.get(key)
        if previous is None:
            status = ActionStatus.CREATE
        elif previous == value:
            status = ActionStatus.NOOP
        else:
            status = ActionStatus.UPDATE
        self.project.set_property(key, value)
        lines = value.count("\n")
        self.report.record(
            ActionKind.SET_PROPERTY, key, status, f"{lines} descriptor line(s)"
        )


def initialize_module(
    project: ProjectModel, settings: Optional[InitializerSettings] = None
) -> InitReport:
    return ModuleInitializer(project, settings).run()
