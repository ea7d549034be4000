"""Tests of the Bunch, which broadcasts the Leaf interface over many leaves."""

import pytest

from sprig import ABSENT, Bunch, InvalidArgument, Leaf

from . import SprigTest

DOCUMENT = (
    "<ul>"
    '<li id="one">1</li>'
    '<li id="two">2 <b>bold</b></li>'
    '<li id="three">3</li>'
    "</ul>"
)


class FailingMinifier:
    async def minify(self, markup, options=None):
        if "two" in markup:
            raise RuntimeError("minifier crashed")
        return markup


class EchoMinifier:
    async def minify(self, markup, options=None):
        return markup.upper()


class TestConstruction(SprigTest):
    def test_none_entries_are_dropped(self):
        leaf = self.document_for(DOCUMENT).select_one("li")
        bunch = Bunch([None, leaf, None])
        assert len(bunch) == 1
        assert bunch.pick(0) == leaf

    def test_accepts_any_iterable(self):
        items = self.document_for(DOCUMENT).select("li")
        assert len(Bunch(leaf for leaf in items)) == 3
        assert len(Bunch()) == 0

    def test_nested_bunches(self):
        items = self.document_for(DOCUMENT).select("li")
        nested = Bunch([items, items.pick(0)])
        assert len(nested) == 2
        assert isinstance(nested.pick(0), Bunch)

    @pytest.mark.parametrize("leaves", [[1], ["li"], [object()]])
    def test_invalid_member(self, leaves):
        with pytest.raises(InvalidArgument):
            Bunch(leaves)

    @pytest.mark.parametrize("leaves", ["li", b"li", {"a": 1}, 5])
    def test_invalid_leaves(self, leaves):
        with pytest.raises(InvalidArgument):
            Bunch(leaves)

    def test_falsy_when_empty(self):
        assert not Bunch()
        assert Bunch([Leaf()])

    def test_repr(self):
        assert repr(Bunch()) == "Bunch([])"
        bunch = Bunch([self.document_for("<p>x</p>").select_one("p")])
        assert repr(bunch) == "Bunch([Leaf(<p>)])"


class TestBroadcast(SprigTest):
    def test_values_are_lists(self):
        items = self.document_for(DOCUMENT).select("li")
        assert items.text == ["1", "2 bold", "3"]
        assert items.name == ["li", "li", "li"]
        assert items.type == ["tag", "tag", "tag"]
        assert items.attributes == [{"id": "one"}, {"id": "two"}, {"id": "three"}]
        assert items.attr == items.attributes
        assert items.markup[0] == '<li id="one">1</li>'
        assert items.inner_markup == ["1", "2 <b>bold</b>", "3"]

    def test_navigation_keeps_positions(self):
        items = self.document_for(DOCUMENT).select("li")
        nexts = items.next_sibling
        assert isinstance(nexts, Bunch)
        assert len(nexts) == 3
        assert nexts.pick(0) == items.pick(1)
        assert nexts.pick(1) == items.pick(2)
        assert nexts.pick(2) is None
        assert nexts.leaves[2] is ABSENT

    def test_absent_slots_stay_absent(self):
        items = self.document_for(DOCUMENT).select("li")
        after = items.next_sibling.next_sibling
        assert len(after) == 3
        assert after.pick(0) == items.pick(2)
        assert after.pick(1) is None
        assert after.pick(2) is None
        assert after.text == ["3", None, None]

    def test_broadcast_matches_pick(self):
        items = self.document_for(DOCUMENT).select("li")
        for op in ["parent", "first_child", "last_child", "previous_sibling", "root"]:
            broadcast = getattr(items, op)
            assert len(broadcast) == len(items)
            for index in range(len(items)):
                assert broadcast.pick(index) == getattr(items.pick(index), op)

    def test_prev_sibling_alias(self):
        items = self.document_for(DOCUMENT).select("li")
        assert list(items.prev_sibling) == list(items.previous_sibling)

    def test_children_and_siblings_are_nested(self):
        items = self.document_for(DOCUMENT).select("li")
        children = items.children
        assert children.pick(0) is None
        assert children.pick(1).name == ["b"]
        siblings = items.siblings
        assert len(siblings) == 3
        assert siblings.pick(0).text == ["1", "2 bold", "3"]

    def test_select_gives_a_bunch_per_member(self):
        items = self.document_for(DOCUMENT).select("li")
        found = items.select("b")
        assert [len(bunch) for bunch in found] == [0, 1, 0]
        assert items.select_one("b").text == ["", "bold", ""]

    def test_nth_child(self):
        items = self.document_for(DOCUMENT).select("li")
        firsts = items.nth_child(1)
        assert firsts.pick(0) is None
        assert firsts.pick(1).name == "b"
        with pytest.raises(InvalidArgument):
            items.nth_child(0)

    def test_absent_values_read_as_none(self):
        items = self.document_for(DOCUMENT).select("li")
        assert items.first_child.name == [None, "b", None]


class TestPick(SprigTest):
    @pytest.mark.parametrize("index,expected", [(0, "1"), (2, "3"), (-1, "3"), (-3, "1")])
    def test_pick(self, index, expected):
        items = self.document_for(DOCUMENT).select("li")
        assert items.pick(index).text == expected

    @pytest.mark.parametrize("index", [3, -4, 100])
    def test_pick_out_of_range(self, index):
        items = self.document_for(DOCUMENT).select("li")
        assert items.pick(index) is None

    @pytest.mark.parametrize("index", ["0", 1.0, True, None])
    def test_pick_needs_an_integer(self, index):
        with pytest.raises(InvalidArgument):
            Bunch().pick(index)


class TestIteration(SprigTest):
    def test_each_visits_in_order_and_chains(self):
        items = self.document_for(DOCUMENT).select("li")
        seen = []
        result = items.each(lambda leaf, index: seen.append((index, leaf.text)))
        assert result is items
        assert seen == [(0, "1"), (1, "2 bold"), (2, "3")]
        assert items.for_each(lambda leaf, index: None) is items

    def test_map(self):
        items = self.document_for(DOCUMENT).select("li")
        mapped = items.map(lambda leaf, index: leaf.first_child)
        assert isinstance(mapped, Bunch)
        assert len(mapped) == 3
        assert mapped.pick(1).name == "b"
        assert mapped.pick(0) is None

    def test_map_rejects_other_values(self):
        items = self.document_for(DOCUMENT).select("li")
        with pytest.raises(InvalidArgument):
            items.map(lambda leaf, index: leaf.text)

    def test_sift(self):
        items = self.document_for(DOCUMENT).select("li")
        odd = items.sift(lambda leaf, index: index % 2 == 0)
        assert odd.text == ["1", "3"]
        assert items.sift(lambda leaf, index: False).text == []

    def test_sift_returns_new_bunch(self):
        items = self.document_for(DOCUMENT).select("li")
        kept = items.sift(lambda leaf, index: True)
        assert kept is not items
        assert kept == items

    def test_iteration_and_unwrap(self):
        items = self.document_for(DOCUMENT).select("li")
        assert [leaf.text for leaf in items] == ["1", "2 bold", "3"]
        assert items.next_sibling.unwrap()[2] is None
        assert isinstance(items.unwrap(), list)


class TestMinify(SprigTest):
    @pytest.mark.asyncio
    async def test_minify_all_members(self):
        items = self.document_for(DOCUMENT).select("li")
        result = await items.minify(minifier=EchoMinifier())
        assert result == ['<LI ID="ONE">1</LI>', '<LI ID="TWO">2 <B>BOLD</B></LI>', '<LI ID="THREE">3</LI>']

    @pytest.mark.asyncio
    async def test_inner_minify_all_members(self):
        items = self.document_for(DOCUMENT).select("li")
        result = await items.inner_minify(minifier=EchoMinifier())
        assert result == ["1", "2 <B>BOLD</B>", "3"]

    @pytest.mark.asyncio
    async def test_absent_members_give_none(self):
        items = self.document_for(DOCUMENT).select("li")
        result = await items.next_sibling.minify(minifier=EchoMinifier())
        assert result[2] is None
        assert len(result) == 3

    @pytest.mark.asyncio
    async def test_one_failure_fails_the_whole_call(self):
        items = self.document_for(DOCUMENT).select("li")
        with pytest.raises(RuntimeError):
            await items.minify(minifier=FailingMinifier())
