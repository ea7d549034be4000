"""Tests of the Leaf, the wrapper around a single node."""

import html5lib
import pytest
from lxml import etree

from sprig import Bunch, InvalidArgument, Leaf, parse
from sprig.element import ROOT_TAG_NAME

from . import SprigTest

DOCUMENT = (
    '<html><head><title>T</title></head><body>'
    '<div id="a"><p>hi</p><!-- note --><p class="x">bye</p></div>'
    "<span>s</span>"
    "<script>if (a < b) { go(); }</script>"
    "</body></html>"
)


class FakeMinifier:
    """Records what it was asked to minify."""

    def __init__(self):
        self.calls = []

    async def minify(self, markup, options=None):
        self.calls.append((markup, options))
        return "minified"


class TestConstruction(SprigTest):
    def test_empty_leaf(self):
        leaf = Leaf()
        assert leaf.is_empty
        assert not leaf
        assert leaf.name == ""
        assert leaf.type is None
        assert leaf.text == ""
        assert leaf.markup == ""
        assert leaf.inner_markup == ""
        assert leaf.attributes == {}
        assert leaf.parent is None
        assert leaf.children is None
        assert leaf.unwrap() is None
        assert repr(leaf) == "Leaf()"

    def test_mapping_gives_empty_leaf(self):
        assert Leaf({}).is_empty
        assert Leaf({"tag": "p"}).is_empty

    @pytest.mark.parametrize("node", ["<p>markup</p>", 42, 1.5, object(), ["p"]])
    def test_invalid_node(self, node):
        with pytest.raises(InvalidArgument):
            Leaf(node)

    def test_comment_is_not_a_node(self):
        with pytest.raises(InvalidArgument):
            Leaf(etree.Comment("nope"))

    def test_wraps_element_parsed_elsewhere(self):
        root = etree.fromstring("<a><b>x</b></a>")
        leaf = Leaf(root)
        assert leaf.known_xml
        assert leaf.name == "a"
        assert leaf.markup == "<a><b>x</b></a>"
        assert leaf.unwrap() is root

    def test_wraps_html5lib_tree_as_html(self):
        tree = html5lib.parse(
            "<p>hi<br>x</p><script>a<b</script>",
            treebuilder="lxml",
            namespaceHTMLElements=False,
        )
        for leaf in Leaf(tree), Leaf(tree.getroot()[1][0]):
            assert not leaf.known_xml
        doc = Leaf(tree)
        assert doc.select_one("script").type == "script"
        assert doc.select_one("p").markup == "<p>hi<br>x</p>"
        assert doc.select_one("P").name == "p"

    def test_namespaced_html_root_is_xml(self):
        root = etree.fromstring('<html xmlns="http://www.w3.org/1999/xhtml"><body/></html>')
        assert Leaf(root).known_xml

    def test_leaf_is_frozen(self):
        leaf = self.document_for("<p>x</p>")
        with pytest.raises(Exception):
            leaf.known_xml = True

    def test_equality_follows_the_node(self):
        doc = self.document_for(DOCUMENT)
        assert doc.select_one("p") == doc.select_one("p")
        assert doc.select_one("p") != doc.select_one("span")
        assert len({doc.select_one("p"), doc.select_one("p", 1)}) == 1
        assert Leaf() == Leaf()

    def test_repr(self):
        doc = self.document_for(DOCUMENT)
        assert repr(doc.select_one("span")) == "Leaf(<span>)"


class TestSelect(SprigTest):
    def test_select_and_select_one(self):
        doc = self.document_for('<div id="a"><p>hi</p><p>bye</p></div>')
        self.assert_texts(doc.select("p"), ["hi", "bye"])
        assert doc.select_one("p", 2).text == "bye"

    def test_select_one_defaults_to_first_match(self):
        doc = self.document_for(DOCUMENT)
        assert doc.select_one("p") == doc.select_one("p", 0)
        assert doc.select_one("p") == doc.select_one("p", 1)
        assert doc.select_one("p").text == "hi"

    def test_select_one_past_the_end_gives_first_match(self):
        doc = self.document_for(DOCUMENT)
        assert doc.select_one("p", 5).text == "hi"
        assert doc.select_one("p", -1).text == "hi"

    def test_select_one_without_match(self):
        doc = self.document_for(DOCUMENT)
        found = doc.select_one("article")
        assert isinstance(found, Leaf)
        assert found.is_empty

    @pytest.mark.parametrize("limit,expected", [(None, 2), (0, 2), (-3, 2), (1, 1), (2, 2), (5, 2)])
    def test_select_limit(self, limit, expected):
        doc = self.document_for(DOCUMENT)
        found = doc.select("p", limit)
        assert isinstance(found, Bunch)
        assert len(found) == expected

    def test_select_without_match(self):
        found = self.document_for(DOCUMENT).select("article")
        assert isinstance(found, Bunch)
        assert len(found) == 0

    def test_element_does_not_match_itself(self):
        doc = self.document_for("<div><div>inner</div></div>")
        outer = doc.select_one("div")
        self.assert_texts(outer.select("div"), ["inner"])
        assert outer.select_one("div", 1).text == "inner"

    def test_document_matches_its_root_element(self):
        doc = self.document_for(DOCUMENT)
        assert doc.select("html").name == ["html"]

    def test_select_scoped_to_element(self):
        doc = self.document_for(DOCUMENT)
        assert doc.select_one("span").select("p").text == []
        assert len(doc.select_one("#a").select("p")) == 2

    def test_attribute_selectors(self):
        doc = self.document_for(DOCUMENT)
        assert doc.select_one("p.x").text == "bye"
        assert doc.select_one('div[id="a"]').name == "div"

    def test_empty_leaf_selects_nothing(self):
        assert len(Leaf().select("p")) == 0
        assert Leaf().select_one("p").is_empty

    @pytest.mark.parametrize("query", ["p[", "::", "div >"])
    def test_invalid_selector(self, query):
        with pytest.raises(InvalidArgument):
            self.document_for(DOCUMENT).select(query)

    @pytest.mark.parametrize("query", [None, 1, b"p"])
    def test_query_must_be_a_string(self, query):
        doc = self.document_for(DOCUMENT)
        with pytest.raises(InvalidArgument):
            doc.select(query)
        with pytest.raises(InvalidArgument):
            doc.select_one(query)

    @pytest.mark.parametrize("bad", ["1", 1.0, True])
    def test_limit_and_nth_must_be_integers(self, bad):
        doc = self.document_for(DOCUMENT)
        with pytest.raises(InvalidArgument):
            doc.select("p", bad)
        with pytest.raises(InvalidArgument):
            doc.select_one("p", bad)

    def test_xml_selectors_are_case_sensitive(self):
        doc = self.document_for("<root><Item>1</Item><item>2</item></root>", "xml")
        self.assert_texts(doc.select("Item"), ["1"])
        self.assert_texts(doc.select("item"), ["2"])


class TestProperties(SprigTest):
    def test_document(self):
        doc = self.document_for(DOCUMENT)
        assert doc.name == ROOT_TAG_NAME == "[document]"
        assert doc.type == "root"
        assert doc.attributes == {}
        assert doc.parent is None

    def test_element_types(self):
        doc = self.document_for(DOCUMENT)
        assert doc.select_one("p").type == "tag"
        assert doc.select_one("script").type == "script"

    def test_style_type(self):
        doc = self.document_for("<style>p { color: red }</style>")
        assert doc.select_one("style").type == "style"

    def test_script_in_xml_is_a_tag(self):
        doc = self.document_for("<root><script>x</script></root>", "xml")
        assert doc.select_one("script").type == "tag"

    def test_attributes(self):
        doc = self.document_for(DOCUMENT)
        div = doc.select_one("div")
        assert div.attributes == {"id": "a"}
        assert div.attr == {"id": "a"}
        assert doc.select_one("span").attributes == {}

    def test_attributes_are_a_copy(self):
        div = self.document_for(DOCUMENT).select_one("div")
        div.attributes["id"] = "changed"
        assert div.attributes == {"id": "a"}

    def test_namespaced_name(self):
        doc = self.document_for('<r xmlns:x="urn:x"><x:item>1</x:item></r>', "xml")
        assert doc.first_child.name == "r"
        assert doc.first_child.first_child.name == "x:item"

    def test_text_ignores_comments(self):
        doc = self.document_for(DOCUMENT)
        assert doc.select_one("div").text == "hibye"

    def test_markup(self):
        doc = self.document_for(DOCUMENT)
        assert doc.select_one("p").markup == "<p>hi</p>"
        assert doc.select_one("p.x").markup == '<p class="x">bye</p>'

    def test_inner_markup(self):
        doc = self.document_for(DOCUMENT)
        div = doc.select_one("div")
        assert div.inner_markup == '<p>hi</p><!-- note --><p class="x">bye</p>'
        assert doc.select_one("p").inner_markup == "hi"

    def test_inner_markup_escapes_text(self):
        doc = self.document_for("<p>a &amp; b<b>c</b> &lt; d</p>")
        assert doc.select_one("p").inner_markup == "a &amp; b<b>c</b> &lt; d"

    def test_inner_markup_of_raw_text_element(self):
        doc = self.document_for(DOCUMENT)
        assert doc.select_one("script").inner_markup == "if (a < b) { go(); }"

    def test_document_markup_round_trip(self):
        doc = self.document_for(DOCUMENT)
        again = parse(doc.markup, "lxml")
        assert again.text == doc.text
        assert again.select("p").text == doc.select("p").text

    def test_document_inner_markup_holds_root_element(self):
        doc = self.document_for(DOCUMENT)
        assert doc.inner_markup.startswith("<html>")
        assert doc.inner_markup.endswith("</html>")

    def test_xml_markup(self):
        doc = self.document_for("<root><empty/><a>1</a></root>", "xml")
        assert doc.select_one("empty").markup == "<empty/>"
        assert doc.select_one("root").inner_markup == "<empty/><a>1</a>"


class TestNavigation(SprigTest):
    def test_children_skip_text_and_comments(self):
        div = self.document_for(DOCUMENT).select_one("div")
        assert div.children.name == ["p", "p"]
        assert div.first_child.text == "hi"
        assert div.last_child.text == "bye"

    def test_no_children(self):
        p = self.document_for(DOCUMENT).select_one("p")
        assert p.children is None
        assert p.first_child is None
        assert p.last_child is None

    def test_document_child_is_root_element(self):
        doc = self.document_for(DOCUMENT)
        assert doc.children.name == ["html"]
        assert doc.first_child == doc.last_child

    def test_siblings_skip_comments(self):
        doc = self.document_for(DOCUMENT)
        first, second = doc.select("p")
        assert first.next_sibling == second
        assert second.previous_sibling == first
        assert second.prev_sibling == first
        assert first.previous_sibling is None
        assert second.next_sibling is None

    def test_siblings_include_self(self):
        p = self.document_for(DOCUMENT).select_one("p")
        self.assert_texts(p.siblings, ["hi", "bye"])

    def test_siblings_of_root_element(self):
        html = self.document_for(DOCUMENT).first_child
        assert html.siblings.name == ["html"]
        assert len(Leaf().siblings) == 0

    def test_parent(self):
        doc = self.document_for(DOCUMENT)
        assert doc.select_one("p").parent.name == "div"
        assert doc.select_one("div").parent.name == "body"

    def test_parent_of_root_element_is_the_document(self):
        doc = self.document_for(DOCUMENT)
        parent = doc.first_child.parent
        assert parent.name == ROOT_TAG_NAME
        assert parent.type == "root"
        assert parent == doc

    def test_root(self):
        doc = self.document_for(DOCUMENT)
        assert doc.select_one("p").root == doc
        assert doc.root == doc

    def test_known_xml_is_passed_on(self):
        doc = self.document_for("<root><a><b/></a></root>", "xml")
        b = doc.select_one("b")
        assert b.known_xml
        assert b.parent.known_xml
        assert b.root.known_xml

    @pytest.mark.parametrize("position,expected", [(1, "hi"), (2, "bye")])
    def test_nth_child(self, position, expected):
        div = self.document_for(DOCUMENT).select_one("div")
        assert div.nth_child(position).text == expected

    def test_nth_child_past_the_end(self):
        div = self.document_for(DOCUMENT).select_one("div")
        assert div.nth_child(3) is None
        assert Leaf().nth_child(1) is None

    @pytest.mark.parametrize("position", [0, -1, 1.5, "1", True])
    def test_nth_child_invalid_position(self, position):
        div = self.document_for(DOCUMENT).select_one("div")
        with pytest.raises(InvalidArgument):
            div.nth_child(position)


class TestMinify(SprigTest):
    @pytest.mark.asyncio
    async def test_minify_hands_over_markup(self):
        minifier = FakeMinifier()
        p = self.document_for(DOCUMENT).select_one("p")
        assert await p.minify(minifier=minifier) == "minified"
        assert minifier.calls == [("<p>hi</p>", None)]

    @pytest.mark.asyncio
    async def test_inner_minify_hands_over_inner_markup(self):
        minifier = FakeMinifier()
        p = self.document_for(DOCUMENT).select_one("p")
        options = {"keep_comments": True}
        assert await p.inner_minify(options, minifier=minifier) == "minified"
        assert minifier.calls == [("hi", options)]
