"""Tests for empty-stylesheet reduction and name reclaiming."""

import os

from stylegraph.analysis import analyze
from stylegraph.css import parse_css
from stylegraph.model import Stylesheet, StylesheetRegistry
from stylegraph.split import reduce_empty, remove_empty, split


def _project(files: dict[str, str], aliases: dict[str, str] | None = None) -> StylesheetRegistry:
    registry = StylesheetRegistry()
    for name, content in files.items():
        path = f"/project/{name}"
        registry.add(Stylesheet(file=path, content=content, root=parse_css(content, file=path)))

    def resolve(specifier: str, base_dir: str) -> str:
        if aliases and specifier in aliases:
            return aliases[specifier]
        return os.path.normpath(os.path.join(base_dir, specifier))

    analyze(registry, resolver=resolve)
    return registry


def _get(registry: StylesheetRegistry, name: str) -> Stylesheet:
    sheet = registry.get(f"/project/{name}")
    assert sheet is not None
    return sheet


# ---------------------------------------------------------------------------
# remove_empty
# ---------------------------------------------------------------------------


class TestRemoveEmpty:
    def test_chain_collapses(self):
        registry = _project({
            "a.css": '@import "./b.css";\n.a { color: red; }',
            "b.css": '@import "./c.css";',
            "c.css": ".c { color: blue; }",
        })
        c = _get(registry, "c.css")
        c.root.nodes[0].remove()

        unlinked = remove_empty(registry)

        assert [s.file for s in unlinked] == ["/project/c.css", "/project/b.css"]
        assert _get(registry, "b.css").unlink
        assert c.unlink
        a = _get(registry, "a.css")
        assert not a.unlink
        assert a.to_string() == ".a {\n  color: red;\n}\n"

    def test_originally_empty_is_kept(self):
        registry = _project({
            "index.css": '@import "./empty.css";',
            "empty.css": "",
        })
        assert remove_empty(registry) == []
        assert not _get(registry, "empty.css").unlink
        assert _get(registry, "index.css").to_string() == '@import "./empty.css";\n'

    def test_whitespace_only_counts_as_originally_empty(self):
        registry = _project({"blank.css": "  \n\n"})
        assert remove_empty(registry) == []

    def test_untouched_registry_is_noop(self):
        registry = _project({
            "index.css": '@import "./a.css";',
            "a.css": ".a { color: red; }",
        })
        assert remove_empty(registry) == []

    def test_second_pass_finds_nothing(self):
        registry = _project({
            "index.css": '@import "./a.css";',
            "a.css": ".a { color: red; }",
        })
        _get(registry, "a.css").root.nodes[0].remove()
        assert len(remove_empty(registry)) == 2
        assert remove_empty(registry) == []

    def test_comment_keeps_file_alive(self):
        registry = _project({
            "index.css": '@import "./a.css";',
            "a.css": "/* keep */\n.a { color: red; }",
        })
        _get(registry, "a.css").root.nodes[1].remove()
        assert remove_empty(registry) == []


# ---------------------------------------------------------------------------
# split + reduce
# ---------------------------------------------------------------------------


class TestSplitAndReduce:
    def test_utilities_only_file_is_replaced(self):
        registry = _project({
            "index.css": '@import "./a.css" layer(utilities);',
            "a.css": "@utility foo {color:red}",
        })
        result = split(registry)

        a = _get(registry, "a.css")
        assert a.derived
        assert a is result.created[0]
        assert a.to_string() == "@utility foo {\n  color: red;\n}\n"
        assert result.unlinked[0].unlink
        assert result.unlinked[0].file == "/project/a.css"
        assert _get(registry, "index.css").to_string() == '@import "./a.css";\n'
        assert registry.get("/project/a.utilities.css") is None

    def test_mixed_file_keeps_both(self):
        registry = _project({
            "index.css": '@import "./a.css" layer(utilities);',
            "a.css": ".a { color: red; }\n@utility foo { color: red; }",
        })
        result = split(registry)
        assert result.unlinked == []
        assert result.created[0].file == "/project/a.utilities.css"
        assert _get(registry, "index.css").to_string() == (
            '@import "./a.css" layer(utilities);\n'
            '@import "./a.utilities.css";\n'
        )

    def test_intermediate_file_survives(self):
        registry = _project({
            "index.css": '@import "./a.css" layer(utilities);',
            "a.css": '@import "./b.css" layer(components);',
            "b.css": "@utility bar { color: blue; }",
        })
        result = split(registry)
        assert [s.file for s in result.unlinked] == ["/project/b.css"]
        a = _get(registry, "a.css")
        assert not a.unlink
        assert a.to_string() == '@import "./b.css";\n'
        assert _get(registry, "b.css").derived

    def test_merged_originals(self):
        registry = _project(
            {
                "index.css": (
                    '@import "./lib.css" layer(utilities);\n'
                    '@import "./alias/lib.css" layer(utilities);'
                ),
                "lib.css": "@utility first { color: red; }",
                "other.css": "@utility second { color: blue; }",
            },
            aliases={"./alias/lib.css": "/project/other.css"},
        )
        result = split(registry)

        assert {s.file for s in result.unlinked} == {"/project/lib.css", "/project/other.css"}
        lib = _get(registry, "lib.css")
        assert lib.derived
        assert [n.params for n in lib.root.nodes] == ["second", "first"]
        assert _get(registry, "index.css").to_string() == '@import "./lib.css";\n'

    def test_reduce_without_result(self):
        registry = _project({
            "index.css": '@import "./a.css";',
            "a.css": ".a { color: red; }",
        })
        _get(registry, "a.css").root.nodes[0].remove()
        unlinked = reduce_empty(registry)
        assert [s.file for s in unlinked] == ["/project/a.css", "/project/index.css"]

    def test_plainly_imported_utilities_file_not_churned(self):
        registry = _project({
            "index.css": '@import "./a.css" layer(utilities);',
            "a.css": '@import "./b.css";',
            "b.css": "@utility bar { color: blue; }",
        })
        result = split(registry)
        b = _get(registry, "b.css")
        assert result.created == []
        assert result.unlinked == []
        assert not b.unlink
        assert not b.derived
        assert _get(registry, "a.css").to_string() == '@import "./b.css";\n'
