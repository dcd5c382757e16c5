from omod_init.tui.renderers import ModuleConsoleUI

__all__ = ["ModuleConsoleUI"]
