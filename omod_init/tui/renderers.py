from rich.console import Console

from omod_init.models import InitReport, ProjectModel
from omod_init.tui.enums import UIStyle
from omod_init.tui.sections import UISection
from omod_init.tui.tables import PropertyTable, ReportTable, ResourceTable
from omod_init.utils import compact_home_path


class ModuleConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_report(
        self,
        report: InitReport,
        project: ProjectModel,
        descriptor_properties: tuple[str, str],
        mode: str,
    ) -> None:
        resource_actions, property_actions = ReportTable.split_actions(report)

        self.console.print(
            UISection.wrap(
                "initialize overview",
                ReportTable.summary_block(report, mode=mode),
                style=UIStyle.BLUE.value,
                subtitle=compact_home_path(project.basedir),
            )
        )

        if resource_actions:
            self.console.print(
                UISection.wrap(
                    "resources",
                    ReportTable.actions_table(resource_actions),
                    style=UIStyle.CYAN.value,
                )
            )
        if property_actions:
            self.console.print(
                UISection.wrap(
                    "properties",
                    ReportTable.actions_table(property_actions),
                    style=UIStyle.MAGENTA.value,
                )
            )

        self.console.print(
            UISection.bullets(
                "descriptors",
                report.descriptors,
                style=UIStyle.GREEN.value,
                empty="No mapping descriptors found.",
            )
        )

        values = {key: project.properties.get(key, "") for key in descriptor_properties}
        self.console.print(
            UISection.wrap(
                "property values",
                PropertyTable.values_table(values),
                style=UIStyle.MAGENTA.value,
            )
        )

    def render_resources(self, project: ProjectModel) -> None:
        if not project.resources:
            self.console.print(
                UISection.note("resources", "No resources declared.", style=UIStyle.DIM.value)
            )
            return
        self.console.print(
            UISection.wrap(
                "declared resources",
                ResourceTable.resources_table(project.resources),
                style=UIStyle.CYAN.value,
            )
        )

    def render_saved(self, path: str, backup: str | None = None) -> None:
        lines = [f"Saved project descriptor: {compact_home_path(path)}"]
        if backup:
            lines.append(f"Backup: {compact_home_path(backup)}")
        self.console.print(
            UISection.note("apply", "\n".join(lines), style=UIStyle.GREEN.value)
        )

    def render_nothing_to_apply(self) -> None:
        self.console.print(
            UISection.note("apply", "Project already initialized.", style=UIStyle.DIM.value)
        )

