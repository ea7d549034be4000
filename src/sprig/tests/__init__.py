"""Helper classes for tests."""

from sprig import parse

__all__ = ["SprigTest"]


class SprigTest:
    default_features = "lxml"

    def document_for(self, markup, features=None, **kwargs):
        """Parse some markup into a document Leaf."""
        return parse(markup, features or self.default_features, **kwargs)

    def assert_texts(self, bunch, expected):
        assert bunch.text == expected
        assert len(bunch) == len(expected)
