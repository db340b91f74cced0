"""The project: compiler settings, its modules and external dependencies."""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from gbld.errors import run_command
from gbld.external import External, ExternalData
from gbld.modes import CompileMode
from gbld.module import Module
from gbld.source_file import SourceFile


def _host_os() -> str:
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform in ("win32", "cygwin"):
        return "windows"
    return sys.platform


@dataclass
class CommandLog:
    """A command that was run, and the source file it compiled, if any."""

    args: list[str]
    file: SourceFile | None = None


class Project:
    """A set of modules and external dependencies built into one output tree."""

    def __init__(self, name: str, root: str, out: str, public: str) -> None:
        self.cc = ""
        self.flags: list[str] = []
        self.os = ""
        self.permission = 0o5777
        self.name = name
        self.root = root
        self.out = os.path.normpath(os.path.join(root, out))
        self.public = os.path.normpath(os.path.join(self.out, public))
        self.cmd_log: list[CommandLog] = []
        self.externals: list[External] = []
        self.modules: list[Module] = []
        self._includes: list[str] = []
        self._libs: list[str] = []

    def __repr__(self) -> str:
        return f"Project({self.name!r}, out={self.out!r})"

    def _make_dirs(self, path: str) -> None:
        os.makedirs(path, mode=self.permission & 0o777, exist_ok=True)

    def _write_file(self, path: str, data: bytes) -> None:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.permission & 0o777)
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)

    def add_lib(self, lib: str) -> None:
        """Add a raw linker argument used when linking executables."""
        self._libs.append(lib)

    def include(self, path: str) -> None:
        """Add an include directory for every compiled file."""
        self._includes.append("-I" + path)

    def libs(self) -> list[str]:
        """Linker arguments for external libraries, project libraries and extra libs, reversed."""
        libs: list[str] = []
        for external in self.externals:
            libs.extend(external.libs())
        libs.extend(
            "-l" + module.name
            for module in self.modules
            if module.mode in (CompileMode.SHARED, CompileMode.STATIC)
        )
        libs.extend(self._libs)
        return libs[::-1]

    def includes(self) -> list[str]:
        """Include flags for the compiler."""
        return list(self._includes)

    def command(self, args: Sequence[str], file: SourceFile | None) -> bytes:
        """Record ``args`` in the command log, run them and return their output.

        Raises :class:`gbld.errors.CompileError` if the command fails.
        """
        args = list(args)
        self.cmd_log.append(CommandLog(args=args, file=file))
        return run_command(args)

    def add_module(self, mode: CompileMode, name: str, src: str, out: str) -> Module:
        """Add a module with explicit source and output directories."""
        module = Module(self, mode, name, src, out)
        self.modules.append(module)
        return module

    def add_module_default(self, mode: CompileMode, name: str) -> Module:
        """Add a module whose sources live in ``<root>/<name>/src``."""
        return self.add_module(
            mode,
            name,
            os.path.normpath(os.path.join(self.root, name, "src")),
            os.path.normpath(os.path.join(self.out, name)),
        )

    def add_executable(self, name: str) -> Module:
        """Add a module linked into an executable."""
        return self.add_module_default(CompileMode.EXECUTABLE, name)

    def add_shared(self, name: str) -> Module:
        """Add a module linked into a shared library."""
        return self.add_module_default(CompileMode.SHARED, name)

    def add_external(self, data: ExternalData) -> External:
        """Add an external dependency."""
        external = External(self, data)
        self.externals.append(external)
        return external

    def compile(self) -> None:
        """Build every external dependency, then every module, stopping at the first error."""
        self._make_dirs(self.out)
        self._make_dirs(self.public)
        for external in self.externals:
            external.compile()
        for module in self.modules:
            module.compile()

    def generate_compile_commands(self) -> None:
        """Write ``compile_commands.json`` for every logged command that compiled a file."""
        directory = os.path.abspath(".")
        entries = [
            {"directory": directory, "arguments": entry.args, "file": entry.file.path}
            for entry in self.cmd_log
            if entry.file is not None
        ]
        data = json.dumps(entries or None, indent="\t", sort_keys=True).encode()
        self._write_file(os.path.join(self.out, "compile_commands.json"), data)


def new_project_default(name: str) -> Project:
    """A project rooted at the current directory building into ``build/public`` with clang++."""
    project = Project(name, ".", "build", "public")
    project.cc = "clang++"
    project.flags = ["-fdiagnostics-color=always"]
    project.os = _host_os()
    return project