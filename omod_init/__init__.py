from omod_init.initializer import ModuleInitializer, initialize_module
from omod_init.models import FilePatternGroup, ProjectModel, ResourceRule
from omod_init.paths import canonicalize
from omod_init.settings import InitializerSettings

__all__ = [
    "FilePatternGroup",
    "InitializerSettings",
    "ModuleInitializer",
    "ProjectModel",
    "ResourceRule",
    "canonicalize",
    "initialize_module",
]
