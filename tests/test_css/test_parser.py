"""Tests for the CSS parser and printer."""

import pytest

from stylegraph.css import AtRule, Comment, Declaration, ParseError, Root, Rule, parse_css


# ---------------------------------------------------------------------------
# At-rules
# ---------------------------------------------------------------------------


class TestImportRule:
    def test_statement_at_rule(self):
        root = parse_css('@import "./a.css" layer(utilities);', file="/p/index.css")
        assert len(root.nodes) == 1
        node = root.nodes[0]
        assert isinstance(node, AtRule)
        assert node.name == "import"
        assert node.params == '"./a.css" layer(utilities)'
        assert node.nodes is None
        assert not node.has_block

    def test_source_location(self):
        root = parse_css('.a { color: red; }\n@import "./b.css";', file="/p/index.css")
        node = root.nodes[1]
        assert node.source.file == "/p/index.css"
        assert node.source.line == 2
        assert node.source.column == 1

    def test_single_quotes(self):
        root = parse_css("@import './a.css';")
        assert root.nodes[0].params == "'./a.css'"

    def test_supports_modifier_kept(self):
        root = parse_css('@import "./a.css" supports(display: grid) screen;')
        assert root.nodes[0].params == '"./a.css" supports(display: grid) screen'


class TestBlockAtRule:
    def test_utility(self):
        root = parse_css("@utility foo {color:red}")
        node = root.nodes[0]
        assert isinstance(node, AtRule)
        assert node.name == "utility"
        assert node.params == "foo"
        assert len(node.nodes) == 1
        decl = node.nodes[0]
        assert isinstance(decl, Declaration)
        assert decl.prop == "color"
        assert decl.value == "red"
        assert decl.parent is node

    def test_media_with_nested_rule(self):
        root = parse_css("@media (min-width: 640px) { .a { color: red; } }")
        media = root.nodes[0]
        assert media.name == "media"
        assert media.params == "(min-width: 640px)"
        rule = media.nodes[0]
        assert isinstance(rule, Rule)
        assert rule.selector == ".a"

    def test_no_params(self):
        root = parse_css("@font-face { font-family: Inter; }")
        node = root.nodes[0]
        assert node.name == "font-face"
        assert node.params == ""
        assert node.nodes[0].prop == "font-family"

    def test_statement_inside_block(self):
        root = parse_css(".btn { @apply px-4 py-2; color: red; }")
        rule = root.nodes[0]
        apply, decl = rule.nodes
        assert isinstance(apply, AtRule)
        assert apply.params == "px-4 py-2"
        assert decl.prop == "color"

    def test_empty_block(self):
        root = parse_css("@layer utilities {}")
        assert root.nodes[0].nodes == []


# ---------------------------------------------------------------------------
# Rules and declarations
# ---------------------------------------------------------------------------


class TestRules:
    def test_multiple_declarations(self):
        root = parse_css(".a { color: red; margin: 0 auto; }")
        rule = root.nodes[0]
        assert [(d.prop, d.value) for d in rule.nodes] == [("color", "red"), ("margin", "0 auto")]

    def test_last_declaration_without_semicolon(self):
        root = parse_css(".a { color: red; margin: 0 }")
        assert root.nodes[0].nodes[1].value == "0"

    def test_pseudo_class_selector(self):
        root = parse_css("a:hover { color: red }")
        assert root.nodes[0].selector == "a:hover"

    def test_nested_selector(self):
        root = parse_css(".a { color: red; &:hover { color: blue; } }")
        rule = root.nodes[0]
        nested = rule.nodes[1]
        assert isinstance(nested, Rule)
        assert nested.selector == "&:hover"

    def test_string_value_with_semicolon(self):
        root = parse_css('.a { content: "a;b"; }')
        assert root.nodes[0].nodes[0].value == '"a;b"'

    def test_url_value(self):
        root = parse_css(".a { background: url(data:image/png;base64,AAAA); }")
        assert root.nodes[0].nodes[0].value == "url(data:image/png;base64,AAAA)"

    def test_important(self):
        root = parse_css(".a { color: red !important; }")
        assert root.nodes[0].nodes[0].value == "red !important"


class TestComments:
    def test_root_comment(self):
        root = parse_css("/* hello */\n.a { color: red; }")
        comment = root.nodes[0]
        assert isinstance(comment, Comment)
        assert comment.text == "hello"

    def test_comment_in_block(self):
        root = parse_css(".a { /* note */ color: red; }")
        rule = root.nodes[0]
        assert isinstance(rule.nodes[0], Comment)
        assert rule.nodes[1].prop == "color"


# ---------------------------------------------------------------------------
# Printing
# ---------------------------------------------------------------------------


class TestPrinting:
    def test_empty(self):
        root = parse_css("")
        assert root.nodes == []
        assert root.to_string() == ""

    def test_whitespace_only(self):
        assert parse_css("  \n\t ").to_string() == ""

    def test_statements_on_consecutive_lines(self):
        root = parse_css('@import "./a.css";@import "./b.css";')
        assert root.to_string() == '@import "./a.css";\n@import "./b.css";\n'

    def test_blocks_separated_by_blank_line(self):
        root = parse_css("@import './a.css';\n.a{color:red}")
        assert root.to_string() == "@import './a.css';\n\n.a {\n  color: red;\n}\n"

    def test_nested_indentation(self):
        root = parse_css("@media print{.a{color:red}}")
        assert root.to_string() == "@media print {\n  .a {\n    color: red;\n  }\n}\n"

    def test_reparse_is_stable(self):
        text = parse_css("@utility foo { color: red; &:hover { color: blue } }").to_string()
        assert parse_css(text).to_string() == text

    def test_str(self):
        root = Root(nodes=[AtRule("import", '"./a.css"')])
        assert str(root) == '@import "./a.css";\n'


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_unclosed_block(self):
        with pytest.raises(ParseError):
            parse_css(".a { color: red;")

    def test_declaration_at_root(self):
        with pytest.raises(ParseError):
            parse_css("color: red;")

    def test_error_carries_file(self):
        with pytest.raises(ParseError) as excinfo:
            parse_css("}", file="/p/broken.css")
        assert excinfo.value.file == "/p/broken.css"
