from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from ..errors import InvalidArgument
from ..models import Element
from .sentinels import ABSENT

__all__ = ["Bunch"]


def _absent_to_none(member):
    return None if member is ABSENT else member


class Bunch(Element):
    """An ordered collection of Leaf objects (or of other Bunches).

    A Bunch offers the same properties and methods as a Leaf, and broadcasts
    each of them over its members: `bunch.parent` is a Bunch holding the parent
    of every member, `bunch.text` a list holding the text of every member.
    Results keep the position of the member they came from. Where a member has
    no result (no parent, no next sibling...) the slot holds `ABSENT`, which
    reads back as None.
    """

    leaves: tuple[Any, ...] = ()

    def __init__(self, leaves=()):
        """Constructor.

        :param leaves: An iterable of Leaf and Bunch objects. None entries are
            dropped; any other kind of entry is an error.
        """
        if isinstance(leaves, (str, bytes, bytearray, Mapping)):
            raise InvalidArgument("Expected leaves to be an iterable of Leaf or Bunch objects.")
        try:
            leaves = list(leaves)
        except TypeError as e:
            raise InvalidArgument("Expected leaves to be an iterable.") from e
        kept = []
        for leaf in leaves:
            if leaf is None:
                continue
            if leaf is not ABSENT and not isinstance(leaf, Element):
                raise InvalidArgument(
                    "Expected all in leaves to be an instance of a Leaf or Bunch.",
                )
            kept.append(leaf)
        super().__init__(leaves=tuple(kept))

    @classmethod
    def _positional(cls, results) -> Bunch:
        """Build a Bunch that keeps a slot for every result, None included."""
        return cls([ABSENT if result is None else result for result in results])

    def _broadcast(self, operation: Callable) -> Bunch:
        return self._positional(
            None if leaf is ABSENT else operation(leaf) for leaf in self.leaves
        )

    def _values(self, attribute: str) -> list:
        return [None if leaf is ABSENT else getattr(leaf, attribute) for leaf in self.leaves]

    def __len__(self) -> int:
        return len(self.leaves)

    def __iter__(self) -> Iterator:
        return (_absent_to_none(leaf) for leaf in self.leaves)

    def __bool__(self) -> bool:
        return bool(self.leaves)

    def __repr__(self) -> str:
        return f"Bunch({list(self)!r})"

    @property
    def attributes(self) -> list:
        """The attributes of each member."""
        return self._values("attributes")

    attr = attributes

    @property
    def name(self) -> list:
        return self._values("name")

    @property
    def type(self) -> list:
        return self._values("type")

    @property
    def text(self) -> list:
        """The text content of each member. Ignores comments."""
        return self._values("text")

    @property
    def markup(self) -> list:
        return self._values("markup")

    @property
    def inner_markup(self) -> list:
        return self._values("inner_markup")

    @property
    def parent(self) -> Bunch:
        return self._broadcast(lambda leaf: leaf.parent)

    @property
    def children(self) -> Bunch:
        return self._broadcast(lambda leaf: leaf.children)

    @property
    def first_child(self) -> Bunch:
        return self._broadcast(lambda leaf: leaf.first_child)

    @property
    def last_child(self) -> Bunch:
        return self._broadcast(lambda leaf: leaf.last_child)

    @property
    def next_sibling(self) -> Bunch:
        return self._broadcast(lambda leaf: leaf.next_sibling)

    @property
    def previous_sibling(self) -> Bunch:
        return self._broadcast(lambda leaf: leaf.previous_sibling)

    prev_sibling = previous_sibling

    @property
    def siblings(self) -> Bunch:
        return self._broadcast(lambda leaf: leaf.siblings)

    @property
    def root(self) -> Bunch:
        return self._broadcast(lambda leaf: leaf.root)

    def select(self, query: str, limit: int | None = None) -> Bunch:
        """The matches of a CSS selector under each member, one Bunch per member."""
        return self._broadcast(lambda leaf: leaf.select(query, limit))

    def select_one(self, query: str, nth: int = 0) -> Bunch:
        return self._broadcast(lambda leaf: leaf.select_one(query, nth))

    def nth_child(self, position: int) -> Bunch:
        return self._broadcast(lambda leaf: leaf.nth_child(position))

    def pick(self, index: int):
        """The member at an index. Negative indices count back from the end.

        :return: A Leaf or Bunch, or None if there is nothing at that index.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgument("Expected index to be an integer.")
        if not -len(self.leaves) <= index < len(self.leaves):
            return None
        return _absent_to_none(self.leaves[index])

    def each(self, callback: Callable) -> Bunch:
        """Call `callback(leaf, index)` for each member, in order.

        :return: This Bunch, for chaining.
        """
        for index, leaf in enumerate(self):
            callback(leaf, index)
        return self

    for_each = each

    def map(self, callback: Callable) -> Bunch:
        """A Bunch of the values returned by `callback(leaf, index)`, which must
        be Leaf or Bunch objects (or None).
        """
        return self._positional(callback(leaf, index) for index, leaf in enumerate(self))

    def sift(self, callback: Callable) -> Bunch:
        """The members for which `callback(leaf, index)` returns a truthy value."""
        return Bunch(
            [leaf for index, leaf in enumerate(self.leaves) if callback(_absent_to_none(leaf), index)],
        )

    async def _settle(self, method: str, options, minifier) -> list:
        async def settle(leaf):
            if leaf is ABSENT:
                return None
            return await getattr(leaf, method)(options, minifier)

        return list(await asyncio.gather(*(settle(leaf) for leaf in self.leaves)))

    async def minify(self, options=None, minifier=None) -> list:
        """Minify the markup of every member concurrently.

        Fails as soon as any member fails.
        """
        return await self._settle("minify", options, minifier)

    async def inner_minify(self, options=None, minifier=None) -> list:
        """Minify the markup of every member's content concurrently."""
        return await self._settle("inner_minify", options, minifier)

    def unwrap(self) -> list:
        """A list of the members, with None in absent slots."""
        return list(self)
