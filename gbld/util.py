"""Small path and file helpers used by the build steps."""

from __future__ import annotations

import os
from collections.abc import Sequence


def _ext(path: str) -> str:
    """Return the suffix after the last dot of the final path element, dot included."""
    base = path.replace(os.sep, "/").rsplit("/", 1)[-1]
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def change_ext(path: str, new_ext: str) -> str:
    """Replace the extension of ``path`` (if any) with ``new_ext``."""
    ext = _ext(path)
    stem = path[: len(path) - len(ext)] if ext else path
    return stem + new_ext


def get_ext(name: str) -> str:
    """Return everything from the first dot of ``name``, e.g. ``.so.3``.

    A name without any dot yields a lone ``"."``.
    """
    return "." + ".".join(name.split(".")[1:])


def read_all_ext(directory: str, name: str, ext_prefs: Sequence[str]) -> tuple[bytes, str]:
    """Read the best-matching file in ``directory`` whose name starts with ``name``.

    Files are matched on their full extension (see :func:`get_ext`); earlier
    entries of ``ext_prefs`` are preferred. Returns the file's contents and its
    base name. Raises :class:`FileNotFoundError` when nothing matches and
    :class:`OSError` when the directory cannot be read.
    """
    prefs = list(ext_prefs)
    found: dict[int, str] = {}

    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda entry: entry.name)

    for entry in entries:
        if entry.is_dir():
            continue
        ext = get_ext(entry.name)
        if entry.name.startswith(name) and ext in prefs:
            found[prefs.index(ext)] = os.path.join(directory, entry.name)

    for index in sorted(found):
        path = found[index]
        with open(path, "rb") as handle:
            return handle.read(), os.path.basename(path)

    raise FileNotFoundError(f"no file named {name} with extensions {prefs} in {directory}")