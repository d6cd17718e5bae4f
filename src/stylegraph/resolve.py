"""Resolve CSS ``@import`` specifiers to absolute file paths.

Follows the module resolution rules CSS tooling uses:

- ``./x`` / ``../x`` / ``/x`` are resolved against the importing directory:
  the exact file, then each configured extension, then the directory's
  ``package.json`` main fields, then ``index.<ext>``.
- Bare specifiers (``pkg`` or ``pkg/sub/file.css``) are looked up in
  ``node_modules`` directories from the base directory upwards.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Callable

from stylegraph.config import UpgradeConfig
from stylegraph.errors import ResolveError

logger = logging.getLogger(__name__)

Resolver = Callable[[str, str], str]


def _is_relative(specifier: str) -> bool:
    return specifier.startswith(("./", "../", "/")) or specifier in (".", "..")


def _try_file(path: str, config: UpgradeConfig) -> str | None:
    if os.path.isfile(path):
        return path
    for ext in config.extensions:
        candidate = path + ext
        if os.path.isfile(candidate):
            return candidate
    return None


def _try_directory(path: str, config: UpgradeConfig) -> str | None:
    if not os.path.isdir(path):
        return None

    manifest = os.path.join(path, "package.json")
    if os.path.isfile(manifest):
        try:
            with open(manifest, encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            logger.debug("Ignoring unreadable %s: %s", manifest, exc)
            data = {}
        for main_field in config.main_fields:
            entry = data.get(main_field) if isinstance(data, dict) else None
            if isinstance(entry, str) and entry:
                found = _try_file(os.path.join(path, entry), config)
                if found:
                    return found

    for ext in config.extensions:
        candidate = os.path.join(path, "index" + ext)
        if os.path.isfile(candidate):
            return candidate
    return None


def _try_path(path: str, config: UpgradeConfig) -> str | None:
    return _try_file(path, config) or _try_directory(path, config)


def _node_modules_dirs(base_dir: str) -> list[str]:
    dirs: list[str] = []
    current = os.path.abspath(base_dir)
    while True:
        if os.path.basename(current) != "node_modules":
            dirs.append(os.path.join(current, "node_modules"))
        parent = os.path.dirname(current)
        if parent == current:
            return dirs
        current = parent


def resolve_css_id(specifier: str, base_dir: str, config: UpgradeConfig | None = None) -> str:
    """Resolve *specifier* relative to *base_dir*.

    Returns the absolute, normalized path of the target file.  Raises
    :class:`ResolveError` when nothing matches.
    """
    config = config or UpgradeConfig()
    if not specifier:
        raise ResolveError(specifier, base_dir)

    if _is_relative(specifier):
        found = _try_path(os.path.join(base_dir, specifier), config)
    else:
        found = None
        for modules in _node_modules_dirs(base_dir):
            found = _try_path(os.path.join(modules, specifier), config)
            if found:
                break

    if not found:
        raise ResolveError(specifier, base_dir)
    return os.path.normpath(os.path.abspath(found))


def make_resolver(config: UpgradeConfig | None = None) -> Resolver:
    """Bind *config* into a ``(specifier, base_dir) -> path`` resolver."""

    def resolver(specifier: str, base_dir: str) -> str:
        return resolve_css_id(specifier, base_dir, config)

    return resolver
