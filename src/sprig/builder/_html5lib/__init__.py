"""Use html5lib to parse HTML into an lxml tree."""

from .builder import HTML5TreeBuilder

__all__ = ["HTML5TreeBuilder"]
