from contextlib import suppress

from ._lxml import LXMLTreeBuilder, LXMLTreeBuilderForXML
from .core import TreeBuilder, TreeBuilderRegistry

__all__ = [
    "builder_registry",
    "TreeBuilder",
    "LXMLTreeBuilder",
    "LXMLTreeBuilderForXML",
]

# The entry point takes feature lists from developers and uses them
# to look up builders in this registry.
builder_registry = TreeBuilderRegistry()

# Builders are registered in reverse order of priority, so that custom
# builder registrations will take precedence. We want lxml's HTML parser
# to take precedence over html5lib, because it's faster.

with suppress(ImportError):
    from ._html5lib import HTML5TreeBuilder

    # If they have html5lib installed.
    __all__ += ["HTML5TreeBuilder"]
    builder_registry.register(HTML5TreeBuilder)

builder_registry.register(LXMLTreeBuilderForXML)
builder_registry.register(LXMLTreeBuilder)
