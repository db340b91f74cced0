[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbld"
version = "0.1.0"
description = "Drive C and C++ builds from Python: modules, shared libraries, external dependencies and compile_commands.json"
requires-python = ">=3.10"
dependencies = []
keywords = ["build", "c", "c++", "clang", "compile_commands", "linker"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Programming Language :: C",
    "Programming Language :: C++",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gbld"]

[tool.pytest.ini_options]
addopts = "-ra"
