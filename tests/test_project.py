import json
import os
import sys

import pytest

from gbld.errors import CompileError
from gbld.external import ExternalData
from gbld.modes import CompileMode
from gbld.project import CommandLog, Project, new_project_default

WRITE_SCRIPT = (
    "import sys; a = sys.argv; "
    "open(a[a.index('-o') + 1], 'w').write(' '.join(a[1:]))"
)


def make_project(tmp_path):
    project = Project("demo", str(tmp_path), "build", "public")
    project.cc = sys.executable
    project.flags = ["-c", WRITE_SCRIPT]
    project.os = "linux"
    return project


def add_source(tmp_path, module_name, file_name):
    src = tmp_path / module_name / "src"
    src.mkdir(parents=True, exist_ok=True)
    (src / file_name).write_bytes(b"code")


def test_new_project_default():
    project = new_project_default("demo")
    assert project.cc == "clang++"
    assert project.flags == ["-fdiagnostics-color=always"]
    assert project.out == "build"
    assert project.public == os.path.join("build", "public")
    assert project.permission == 0o5777


def test_include_flags(tmp_path):
    project = make_project(tmp_path)
    project.include("/usr/include/foo")
    project.include("inc")
    assert project.includes() == ["-I/usr/include/foo", "-Iinc"]


def test_libs_order_is_reversed(tmp_path):
    project = make_project(tmp_path)
    project.add_external(ExternalData(name="z", bin="/opt/bin", libs=["z"]))
    project.add_executable("app")
    project.add_shared("core")
    project.add_module_default(CompileMode.STATIC, "archive")
    project.add_lib("-lm")
    assert project.libs() == ["-lm", "-larchive", "-lcore", "-L/opt/bin", "-lz"]


def test_add_module_default_paths(tmp_path):
    project = make_project(tmp_path)
    module = project.add_executable("app")
    assert module.src == os.path.join(str(tmp_path), "app", "src")
    assert module.out == os.path.join(str(tmp_path), "build", "app")
    assert module.mode is CompileMode.EXECUTABLE
    assert project.modules == [module]


def test_command_logs_and_returns_output(tmp_path):
    project = make_project(tmp_path)
    args = [sys.executable, "-c", "import sys; sys.stdout.write('hi')"]
    assert project.command(args, None) == b"hi"
    assert project.cmd_log == [CommandLog(args=args, file=None)]


def test_command_failure_is_still_logged(tmp_path):
    project = make_project(tmp_path)
    args = [sys.executable, "-c", "import sys; sys.exit(2)"]
    with pytest.raises(CompileError):
        project.command(args, None)
    assert project.cmd_log[0].args == args


def test_compile_creates_output_directories(tmp_path):
    project = make_project(tmp_path)
    result = project.compile()
    assert result is None
    assert os.listdir(project.out) == ["public"]
    assert os.listdir(project.public) == []
    assert project.cmd_log == []


def test_full_build_and_compile_commands(tmp_path):
    project = make_project(tmp_path)
    add_source(tmp_path, "core", "lib.cpp")
    add_source(tmp_path, "app", "main.cpp")
    core = project.add_shared("core")
    lib_file = core.add_file("lib.cpp")
    app = project.add_executable("app")
    main_file = app.add_file("main.cpp")
    project.compile()

    assert os.path.exists(os.path.join(project.public, "libcore.so"))
    assert os.path.exists(os.path.join(project.public, "app"))
    assert "-lcore" in project.cmd_log[-1].args

    project.generate_compile_commands()
    with open(os.path.join(project.out, "compile_commands.json")) as handle:
        entries = json.load(handle)
    assert [entry["file"] for entry in entries] == [lib_file.path, main_file.path]
    assert all(entry["directory"] == os.path.abspath(".") for entry in entries)
    file_logs = [log for log in project.cmd_log if log.file is not None]
    assert [entry["arguments"] for entry in entries] == [log.args for log in file_logs]


def test_compile_commands_empty_is_null(tmp_path):
    project = make_project(tmp_path)
    project.compile()
    project.generate_compile_commands()
    with open(os.path.join(project.out, "compile_commands.json")) as handle:
        assert json.load(handle) is None