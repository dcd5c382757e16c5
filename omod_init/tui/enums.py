from enum import Enum

from omod_init.models import ActionStatus


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


ACTION_STATUS_STYLE = {
    ActionStatus.CREATE: UIStyle.GREEN.value,
    ActionStatus.UPDATE: UIStyle.CYAN.value,
    ActionStatus.SKIP: UIStyle.YELLOW.value,
    ActionStatus.ABSENT: UIStyle.DIM.value,
    ActionStatus.NOOP: UIStyle.DIM.value,
}
