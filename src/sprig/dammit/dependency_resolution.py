"""
Import a library to guess the character encoding of undeclared bytes. Any of
these work, since they share the same `detect()` API:

* charset-normalizer (a dependency of sprig)
* cchardet
* chardet
"""
from contextlib import suppress

__all__ = ["chardet_module"]

chardet_module = None
try:
    #  PyPI package: charset-normalizer
    import charset_normalizer as chardet_module
except ImportError:
    try:
        #  PyPI package: cchardet
        import cchardet as chardet_module
    except ImportError:
        with suppress(ImportError):
            #  PyPI package: chardet
            import chardet as chardet_module
