"""A single translation unit compiled to an object file."""

from __future__ import annotations

import hashlib
import os
from typing import TYPE_CHECKING

from gbld.util import change_ext

if TYPE_CHECKING:
    from gbld.module import Module

EMPTY_HASH = bytes(16)


class SourceFile:
    """A source file of a module and the object file it compiles to."""

    def __init__(self, module: Module, name: str) -> None:
        self.module = module
        self.name = name
        self.path = os.path.normpath(os.path.join(module.src, name))
        self.out = os.path.normpath(os.path.join(module.out, change_ext(name, ".o")))
        try:
            with open(self.path, "rb") as handle:
                data = handle.read()
        except OSError:
            self.hash = EMPTY_HASH
        else:
            self.hash = hashlib.md5(data, usedforsecurity=False).digest()

    def __repr__(self) -> str:
        return f"SourceFile({self.path!r} -> {self.out!r})"

    def compile(self) -> None:
        """Compile the file to its object file, recording its hash in the module.

        Raises :class:`gbld.errors.CompileError` if the compiler fails.
        """
        project = self.module.project
        args = [
            project.cc,
            *project.flags,
            *project.includes(),
            "-o",
            self.out,
            "-c",
            "-fPIC",
            "-MMD",
            self.path,
        ]
        self.module.hashes[self.name] = self.hash
        project.command(args, self)