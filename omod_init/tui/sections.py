from typing import Iterable, Optional

from rich.panel import Panel

from omod_init.tui.enums import UIStyle


class UISection:
    @staticmethod
    def wrap(title: str, body, style: str = UIStyle.BLUE.value, subtitle: Optional[str] = None) -> Panel:
        return Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))

    @staticmethod
    def note(title: str, body: str, style: str) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def bullets(title: str, items: Iterable[str], style: str, empty: str) -> Panel:
        lines = [f"- {item}" for item in items]
        if not lines:
            return UISection.note(title, empty, style=UIStyle.DIM.value)
        return UISection.note(title, "\n".join(lines), style=style)
