"""Build C and C++ projects from Python: modules, external dependencies and compile_commands.json."""

__version__ = "0.1.0"
__all__ = ["errors", "external", "module", "modes", "project", "source_file", "util"]