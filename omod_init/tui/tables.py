from rich.table import Column, Table
from rich.text import Text

from omod_init.models import ActionKind, ActionStatus, InitAction, InitReport, ResourceRule
from omod_init.tui.enums import ACTION_STATUS_STYLE, UIStyle


class ReportTable:
    @staticmethod
    def summary_block(report: InitReport, mode: str):
        counts = report.summary()
        chips = [
            f"{status.value}={counts[status.value]}"
            for status in ActionStatus
            if counts[status.value] > 0
        ]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        table.add_row("Actions", str(counts["actions"]))
        table.add_row("Statuses", "  ".join(chips))
        table.add_row("Descriptors", str(counts["descriptors"]))
        return table

    @staticmethod
    def split_actions(report: InitReport) -> tuple[list[InitAction], list[InitAction]]:
        resource_actions: list[InitAction] = []
        property_actions: list[InitAction] = []
        for action in report.actions:
            if action.kind == ActionKind.ADD_RESOURCE:
                resource_actions.append(action)
            else:
                property_actions.append(action)
        return resource_actions, property_actions

    @staticmethod
    def actions_table(actions: list[InitAction]) -> Table:
        table = Table(
            Column(header="Type", width=12),
            Column(header="Status", width=8),
            Column(header="Target", overflow="ellipsis", max_width=48),
            Column(header="Reason", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )

        for action in actions:
            status_style = ACTION_STATUS_STYLE.get(action.status, UIStyle.WHITE.value)
            status_text = f"[{status_style}]{action.status.value}[/{status_style}]"
            table.add_row(action.kind.value, status_text, action.target, action.detail)
        return table


class ResourceTable:
    @staticmethod
    def resources_table(resources: list[ResourceRule]) -> Table:
        table = Table(
            Column(header="Directory", overflow="fold"),
            Column(header="Filtering", width=9),
            Column(header="Includes", overflow="fold"),
            Column(header="Target", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for resource in resources:
            filtering = (
                f"[{UIStyle.GREEN.value}]yes[/{UIStyle.GREEN.value}]"
                if resource.filtering
                else "no"
            )
            table.add_row(
                resource.directory,
                filtering,
                ", ".join(resource.includes),
                resource.target_path or "",
            )
        return table


class PropertyTable:
    @staticmethod
    def values_table(values: dict[str, str]) -> Table:
        table = Table(
            Column(header="Property", width=20),
            Column(header="Value", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for key, value in values.items():
            body = value.rstrip("\n") or "(empty)"
            table.add_row(key, Text(body))
        return table
