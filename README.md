# gbld

`gbld` is a small library for driving C and C++ builds from a Python script.
You describe a project as modules (executables and shared libraries), external
dependencies that build themselves with their own commands, include
directories and extra linker arguments. `gbld` runs the compiler and linker,
copies the results into a public output directory and can write a
`compile_commands.json` file for editors and language servers.

It has no dependencies outside the standard library.

## Layout

With `new_project_default` a project looks like this:

```
./
  app/src/main.cpp
  core/src/core.cpp
  build/<module>/          # object files (.o, .d) and hashes.json
  build/public/            # executables, shared libraries, licenses/
  build/compile_commands.json
```

## Usage

```python
from gbld.project import new_project_default
from gbld.external import ExternalData

pj = new_project_default("demo")   # clang++, host OS, ./build, ./build/public
pj.include("include")              # adds -Iinclude to every compile
pj.add_lib("-lpthread")            # raw linker argument for executables

pj.add_external(ExternalData(
    name="zlib",
    license="third_party/zlib/LICENSE",
    bin="third_party/zlib/build",
    libs=["z"],
    build_commands=[["make", "-C", "third_party/zlib"]],
))

core = pj.add_shared("core")
core.add_file("core.cpp")

app = pj.add_executable("app")
app.add_file("main.cpp")

pj.compile()
pj.generate_compile_commands()
```

Modules can also be added with explicit source and output directories through
`Project.add_module(mode, name, src, out)`, with a `gbld.modes.CompileMode`
(`EXECUTABLE`, `SHARED`, `STATIC`). A `Project` can be built by hand as
`Project(name, root, out, public)`; then set its `cc`, `flags` and `os`
(`"linux"` or `"windows"`) yourself.

## What `Project.compile()` does

1. Creates the output and public directories.
2. For each external dependency, in the order added:
   - joins its `build_commands` with `&&` and runs them through `/bin/sh -c`;
   - for every entry of `libs`, copies `lib<name>` from `bin` into the public
     directory, preferring the extension `.so.3`, then `.so.1`, `.so`, `.a`
     (a missing library raises `FileNotFoundError`);
   - copies its `license` file to `public/licenses/<name>`.
3. For each module, in the order added:
   - compiles every source file with
     `<cc> <flags> <includes> -o <out>.o -c -fPIC -MMD <file>`;
   - writes the MD5 hash of every source file to `hashes.json` in the
     module's output directory;
   - links it. Shared modules become `lib<name>.so` (Linux) or
     `lib<name>.dll` (Windows) in the public directory. Executables become
     `<name>` or `<name>.exe`, with rpath `$ORIGIN` (Linux) or `.` (Windows),
     `-L<public>` and the link arguments from `Project.libs()`; the link
     command is printed before it runs.

`Project.libs()` lists `-l`/`-L` flags of external dependencies that have a
`bin` directory, `-l<name>` for every shared or static module, then the
arguments given to `add_lib`, and returns the whole list reversed.

Building stops at the first failure. A failing compiler, linker or build
command raises `gbld.errors.CompileError`, whose `output` holds the command's
combined stdout and stderr. An operating system other than `linux` or
`windows`, or a module in `STATIC` mode, raises `ValueError`.

Every command run goes through `Project.command()` and is recorded in
`Project.cmd_log`. `Project.generate_compile_commands()` writes the entries
that compiled a single source file to `<out>/compile_commands.json`, with the
current working directory as `directory`.

The helpers in `gbld.util` (`change_ext`, `get_ext`, `read_all_ext`) and
`gbld.errors.run_command` can be used on their own.

## What it does not do

- It does not build static libraries: a `STATIC` module can be declared, and
  is named in link arguments, but compiling it raises `ValueError`.
- It does not rebuild incrementally: every source file is compiled on every
  build. The hashes in `hashes.json` are written but not used to skip work,
  and the `.d` files from `-MMD` are not read.
- It has no command-line tool; a build is a Python script that calls the
  library.
- Dependencies between modules are not ordered for you; add them in the order
  they must be built.