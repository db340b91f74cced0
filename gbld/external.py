"""Third-party dependencies built by their own commands."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gbld.util import read_all_ext

if TYPE_CHECKING:
    from gbld.project import Project

_LIB_EXTENSIONS = [".so.3", ".so.1", ".so", ".a"]


@dataclass
class ExternalData:
    """Description of an external dependency."""

    name: str = ""
    license: str = ""
    bin: str = ""
    libs: list[str] = field(default_factory=list)
    build_commands: list[list[str]] = field(default_factory=list)


class External:
    """An external dependency attached to a project."""

    def __init__(self, project: Project, data: ExternalData) -> None:
        self.project = project
        self.data = data

    def __repr__(self) -> str:
        return f"External({self.data.name!r})"

    def libs(self) -> list[str]:
        """Linker flags for the dependency's libraries; empty without a binary directory."""
        if not self.data.bin:
            return []
        return [*("-l" + lib for lib in self.data.libs), "-L" + self.data.bin]

    def compile(self) -> None:
        """Run the build commands, then copy libraries and licence to the public directory."""
        project = self.project
        commands = [" ".join(command) for command in self.data.build_commands]
        if commands:
            project.command(["/bin/sh", "-c", "&&".join(commands)], None)

        for lib in self.data.libs:
            data, filename = read_all_ext(self.data.bin, "lib" + lib, _LIB_EXTENSIONS)
            project._write_file(os.path.join(project.public, filename), data)

        license_dir = os.path.join(project.public, "licenses")
        project._make_dirs(license_dir)
        with open(self.data.license, "rb") as handle:
            license_data = handle.read()
        project._write_file(os.path.join(license_dir, self.data.name), license_data)