"""File naming for derived stylesheets and the specifiers that point at them."""

from __future__ import annotations

import os
import posixpath

from stylegraph.config import UpgradeConfig


def derived_path(sheet_file: str, specifier: str, config: UpgradeConfig | None = None) -> str:
    """Path of the derived stylesheet for *sheet_file* imported via *specifier*.

    The name comes from the import site (``./a.css`` -> ``a.utilities.css``)
    and the file sits next to *sheet_file*.
    """
    config = config or UpgradeConfig()
    name = posixpath.basename(specifier) or os.path.basename(sheet_file)
    stem, ext = os.path.splitext(name)
    if ext not in config.extensions:
        stem, ext = name, config.extensions[0]
    return os.path.join(os.path.dirname(sheet_file), stem + config.derived_suffix + ext)


def sibling_specifier(specifier: str, importer_dir: str, target: str) -> str:
    """Rewrite *specifier* so that, from *importer_dir*, it points at *target*.

    Only the last path segment is swapped when that is enough, so
    ``"./styles/a.css"`` becomes ``"./styles/a.utilities.css"``.  Otherwise a
    relative path is built from scratch.
    """
    base = posixpath.basename(specifier)
    candidate = specifier[: len(specifier) - len(base)] + os.path.basename(target)
    if os.path.normpath(os.path.join(importer_dir, candidate)) == os.path.normpath(target):
        return candidate

    relative = os.path.relpath(target, importer_dir).replace(os.sep, "/")
    if relative == ".." or relative.startswith("../"):
        return relative
    return "./" + relative
