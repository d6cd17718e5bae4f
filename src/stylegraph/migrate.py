"""Migration pipeline: analyze the import graph, run transforms, split utilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from stylegraph.analysis import analyze
from stylegraph.config import UpgradeConfig
from stylegraph.css.parser import parse_css
from stylegraph.errors import MigrationError
from stylegraph.model.diagnostic import Diagnostic
from stylegraph.model.registry import StylesheetRegistry
from stylegraph.model.stylesheet import Stylesheet
from stylegraph.resolve import Resolver
from stylegraph.split import SplitResult, split
from stylegraph.transforms import Transform, apply_transforms

logger = logging.getLogger(__name__)


@dataclass
class MigrationReport:
    """Outcome of :func:`run`."""

    diagnostics: list[Diagnostic] = field(default_factory=list)
    split: SplitResult = field(default_factory=SplitResult)

    @property
    def changed(self) -> bool:
        return bool(self.split.created or self.split.unlinked)


def migrate_contents(
    stylesheet: Stylesheet | str,
    transforms: list[Transform] | None = None,
    config: UpgradeConfig | None = None,
) -> Stylesheet:
    """Run the transform passes over one stylesheet (or raw CSS text)."""
    if isinstance(stylesheet, str):
        stylesheet = Stylesheet(content=stylesheet, root=parse_css(stylesheet))
    logger.debug("Migrating %s", stylesheet.file or "<inline stylesheet>")
    return apply_transforms(stylesheet, transforms, config=config)


def migrate(
    stylesheet: Stylesheet,
    transforms: list[Transform] | None = None,
    config: UpgradeConfig | None = None,
) -> Stylesheet:
    """Migrate a stylesheet that lives on disk."""
    if not stylesheet.file:
        raise MigrationError("Cannot migrate a stylesheet without a file path")
    return migrate_contents(stylesheet, transforms, config=config)


def run(
    registry: StylesheetRegistry,
    resolver: Resolver | None = None,
    config: UpgradeConfig | None = None,
    transforms: list[Transform] | None = None,
) -> MigrationReport:
    """Run the whole pipeline over *registry* in place.

    1. Build the import graph and propagate layers.
    2. Apply the transform passes to every stylesheet with a file.
    3. Split utilities into derived stylesheets and drop emptied files.
    """
    config = config or UpgradeConfig()
    diagnostics = analyze(registry, resolver=resolver, config=config)

    for sheet in list(registry):
        if sheet.file is None or sheet.root is None:
            continue
        migrate(sheet, transforms, config=config)

    result = split(registry, config=config)
    logger.info(
        "Created %d stylesheet(s), removed %d",
        len(result.created),
        len(result.unlinked),
    )
    return MigrationReport(diagnostics=diagnostics, split=result)
