"""Reading stylesheets from disk and writing migration results back."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable

from stylegraph.config import UpgradeConfig
from stylegraph.css.parser import parse_css
from stylegraph.model.registry import StylesheetRegistry
from stylegraph.model.stylesheet import Stylesheet

logger = logging.getLogger(__name__)


def _absolute(file: str, config: UpgradeConfig) -> str:
    return os.path.normpath(os.path.join(config.cwd or os.getcwd(), file))


def _read(path: str) -> str:
    with open(path, encoding="utf-8") as fh:
        return fh.read()


def prepare(stylesheet: Stylesheet, config: UpgradeConfig | None = None) -> Stylesheet:
    """Make *stylesheet*'s path absolute, read it, and parse it."""
    config = config or UpgradeConfig()
    if stylesheet.file:
        stylesheet.file = _absolute(stylesheet.file, config)
        stylesheet.content = _read(stylesheet.file)
    if stylesheet.content is not None:
        stylesheet.root = parse_css(stylesheet.content, file=stylesheet.file)
    return stylesheet


def load(
    paths: Iterable[str],
    config: UpgradeConfig | None = None,
    max_workers: int | None = None,
) -> StylesheetRegistry:
    """Read and parse *paths* into a new registry.

    Files are read concurrently; parsing and registration happen on the
    calling thread, in the order the paths were given.  Duplicate paths are
    loaded once.
    """
    config = config or UpgradeConfig()
    files = list(dict.fromkeys(_absolute(p, config) for p in paths))

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        contents = list(pool.map(_read, files))

    registry = StylesheetRegistry()
    for file, content in zip(files, contents):
        registry.add(Stylesheet(file=file, content=content, root=parse_css(content, file=file)))
    logger.debug("Loaded %d stylesheet(s)", len(registry))
    return registry


@dataclass
class WritePlan:
    """Files to write and files to delete after a migration."""

    writes: dict[str, str] = field(default_factory=dict)
    deletes: list[str] = field(default_factory=list)


def plan(registry: StylesheetRegistry) -> WritePlan:
    """Work out what :func:`commit` would do, without touching disk.

    Files whose tree prints the same as when they were read are not
    rewritten; a derived stylesheet that took over a removed file's path is
    compared against that file.  An unlinked file is not deleted when a live
    stylesheet claims its path.
    """
    result = WritePlan()
    replaced = {
        sheet.file: sheet.content
        for sheet in registry
        if sheet.unlink and sheet.file is not None and sheet.content is not None
    }
    claimed: set[str] = set()
    for sheet in registry:
        if sheet.file is None or sheet.unlink or sheet.root is None:
            continue
        claimed.add(sheet.file)
        text = sheet.to_string()
        content = sheet.content if sheet.content is not None else replaced.get(sheet.file)
        if content is not None and text == parse_css(content, file=sheet.file).to_string():
            continue
        result.writes[sheet.file] = text

    for sheet in registry:
        if not sheet.unlink or sheet.file is None or sheet.derived:
            continue
        if sheet.file in claimed:
            continue
        result.deletes.append(sheet.file)
    return result


def commit(registry: StylesheetRegistry) -> WritePlan:
    """Write changed stylesheets and delete unlinked ones."""
    result = plan(registry)
    for file in result.deletes:
        if os.path.exists(file):
            logger.info("Deleting %s", file)
            os.remove(file)
    for file, text in result.writes.items():
        logger.info("Writing %s", file)
        os.makedirs(os.path.dirname(file), exist_ok=True)
        with open(file, "w", encoding="utf-8") as fh:
            fh.write(text)
    return result
