"""A buildable unit: its sources and how they are linked."""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING

from gbld.modes import CompileMode
from gbld.source_file import SourceFile

if TYPE_CHECKING:
    from gbld.project import Project


def _load_hashes(path: str) -> dict[str, bytes]:
    try:
        with open(path, "rb") as handle:
            raw = json.load(handle)
        return {str(key): bytes(value)[:16].ljust(16, b"\0") for key, value in raw.items()}
    except (OSError, ValueError, TypeError, AttributeError):
        return {}


class Module:
    """A set of source files built into an executable or a library."""

    def __init__(self, project: Project, mode: CompileMode, name: str, src: str, out: str) -> None:
        self.project = project
        self.mode = mode
        self.name = name
        self.src = src
        self.out = out
        self.files: list[SourceFile] = []
        self.hashes_path = os.path.join(out, "hashes.json")
        self.hashes = _load_hashes(self.hashes_path)

    def __repr__(self) -> str:
        return f"Module({self.name!r}, {self.mode.name})"

    def add_file(self, name: str) -> SourceFile:
        """Add a source file, relative to the module's source directory."""
        source = SourceFile(self, name)
        self.files.append(source)
        return source

    def object_paths(self) -> list[str]:
        """Paths of the object files of the module, in file order."""
        return [source.out for source in self.files]

    def compile(self) -> None:
        """Compile every file, store the hashes, then link the module."""
        self.project._make_dirs(self.out)

        for source in self.files:
            source.compile()

        data = json.dumps(
            {name: list(digest) for name, digest in self.hashes.items()},
            separators=(",", ":"),
            sort_keys=True,
        ).encode()
        self.project._write_file(self.hashes_path, data)

        if self.mode == CompileMode.EXECUTABLE:
            self.compile_executable()
        elif self.mode == CompileMode.SHARED:
            self.compile_shared()
        else:
            raise ValueError("unsupported compile mode")

    def compile_executable(self) -> None:
        """Link the module's object files into an executable."""
        project = self.project
        if project.os == "linux":
            ext, rpath = "", "-Wl,-rpath,$ORIGIN"
        elif project.os == "windows":
            ext, rpath = ".exe", "-Wl,-rpath,."
        else:
            raise ValueError("unsupported operating system: " + project.os)

        args = [
            project.cc,
            *project.flags,
            "-o",
            os.path.join(project.public, self.name + ext),
            *self.object_paths(),
            rpath,
            "-L" + project.public,
            *project.libs(),
        ]
        print(args)
        project.command(args, None)

    def compile_shared(self) -> None:
        """Link the module's object files into a shared library."""
        project = self.project
        if project.os == "linux":
            ext = ".so"
        elif project.os == "windows":
            ext = ".dll"
        else:
            raise ValueError("unsupported operating system: " + project.os)

        args = [
            project.cc,
            *project.flags,
            "-shared",
            "-fPIC",
            "-o",
            os.path.join(project.public, "lib" + self.name + ext),
            *self.object_paths(),
        ]
        project.command(args, None)