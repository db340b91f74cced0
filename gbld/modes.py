"""Kinds of artefact a module can be built into."""

from enum import IntEnum


class CompileMode(IntEnum):
    """What a module is linked into."""

    EXECUTABLE = 0
    SHARED = 1
    STATIC = 2