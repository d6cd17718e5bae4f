"""Arena of stylesheets keyed by resolved file path."""

from __future__ import annotations

from typing import Iterable, Iterator

from stylegraph.css.nodes import AtRule
from stylegraph.errors import CyclicImportError, StylegraphError
from stylegraph.model.stylesheet import Stylesheet


class StylesheetRegistry:
    """Owns every participating stylesheet.

    Stylesheets get stable integer ids in insertion order; relations between
    them (``parents``) are stored as id sets.  There is exactly one live
    stylesheet per file path.
    """

    def __init__(self, stylesheets: Iterable[Stylesheet] = ()) -> None:
        self._sheets: list[Stylesheet] = []
        self._by_file: dict[str, Stylesheet] = {}
        self._ancestors: dict[int, frozenset[int]] = {}
        for sheet in stylesheets:
            self.add(sheet)

    # --- membership ---------------------------------------------------------

    def add(self, sheet: Stylesheet) -> Stylesheet:
        """Register *sheet* and assign its id."""
        if sheet.id is not None:
            raise ValueError(f"Stylesheet is already registered with id {sheet.id}")
        if sheet.file is not None and sheet.file in self._by_file:
            raise ValueError(f"A stylesheet for {sheet.file!r} is already registered")
        sheet.id = len(self._sheets)
        self._sheets.append(sheet)
        if sheet.file is not None:
            self._by_file[sheet.file] = sheet
        return sheet

    def get(self, file: str) -> Stylesheet | None:
        return self._by_file.get(file)

    def by_id(self, sheet_id: int) -> Stylesheet:
        return self._sheets[sheet_id]

    def rename(self, sheet: Stylesheet, file: str) -> None:
        """Move *sheet* to *file*, taking the slot over from whatever held it."""
        if sheet.file is not None and self._by_file.get(sheet.file) is sheet:
            del self._by_file[sheet.file]
        sheet.file = file
        self._by_file[file] = sheet

    def __iter__(self) -> Iterator[Stylesheet]:
        return iter(self._sheets)

    def __len__(self) -> int:
        return len(self._sheets)

    def __contains__(self, file: object) -> bool:
        return file in self._by_file

    # --- graph --------------------------------------------------------------

    def link(self, parent: Stylesheet, child: Stylesheet, node: AtRule) -> None:
        """Record that *node* in *parent* imports *child*."""
        parent_id = self._id(parent)
        child.add_import_rule(node)
        child.parents.add(parent_id)
        self._ancestors.clear()

    def set_parents(self, sheet: Stylesheet, parents: Iterable[int]) -> None:
        sheet.parents = set(parents)
        self._ancestors.clear()

    def parents(self, sheet: Stylesheet) -> list[Stylesheet]:
        return [self._sheets[i] for i in sorted(sheet.parents)]

    def ancestors(self, sheet: Stylesheet) -> list[Stylesheet]:
        """Every stylesheet that imports *sheet*, directly or transitively.

        Results are memoized until the next :meth:`link`.  Raises
        :class:`CyclicImportError` when the import graph has a cycle through
        *sheet*'s ancestry.
        """
        ids = self._ancestor_ids(self._id(sheet), [])
        return [self._sheets[i] for i in sorted(ids)]

    def _id(self, sheet: Stylesheet) -> int:
        if sheet.id is None or sheet.id >= len(self._sheets) or self._sheets[sheet.id] is not sheet:
            raise StylegraphError(f"Stylesheet {sheet.file!r} is not registered")
        return sheet.id

    def _ancestor_ids(self, sheet_id: int, trail: list[int]) -> frozenset[int]:
        cached = self._ancestors.get(sheet_id)
        if cached is not None:
            return cached
        if sheet_id in trail:
            # trail runs child -> parent; report it in import order.
            loop = trail[trail.index(sheet_id):] + [sheet_id]
            raise CyclicImportError([self._describe(i) for i in reversed(loop)])

        trail.append(sheet_id)
        result: set[int] = set()
        for parent_id in sorted(self._sheets[sheet_id].parents):
            result.add(parent_id)
            result |= self._ancestor_ids(parent_id, trail)
        trail.pop()

        frozen = frozenset(result)
        self._ancestors[sheet_id] = frozen
        return frozen

    def _describe(self, sheet_id: int) -> str:
        return self._sheets[sheet_id].file or f"<stylesheet {sheet_id}>"
