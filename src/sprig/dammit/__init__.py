"""Turn markup bytes into text by whatever means necessary.

Follows Beautiful Soup's "Unicode, Dammit": trust the caller, then the
byte-order mark, then the document's own declaration, then a statistical guess,
then UTF-8 and Windows-1252.
"""
from .detection import EncodingDetector, chardet_dammit, decode_markup, find_codec

__all__ = ["EncodingDetector", "chardet_dammit", "decode_markup", "find_codec"]
