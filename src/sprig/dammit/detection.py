import codecs
import logging

from .dependency_resolution import chardet_module
from .encodings import HTML_META_RE, XML_ENCODING_RE

__all__ = ["chardet_dammit", "EncodingDetector", "find_codec", "decode_markup"]

log = logging.getLogger(__name__)

# Values seen in the wild for "charset" that aren't Python codec aliases.
CHARSET_ALIASES = {"macintosh": "mac-roman", "x-sjis": "shift-jis"}


def chardet_dammit(data):
    if chardet_module is None or not data:
        return None
    return chardet_module.detect(data)["encoding"]


def _codec(charset):
    if not charset:
        return None
    try:
        codecs.lookup(charset)
    except (LookupError, ValueError):
        return None
    return charset


def find_codec(charset):
    """Convert the name of a character set to a Python codec name.

    :param charset: The name of a character set.
    :return: The name of a codec, or None if Python has no such codec.
    """
    if not charset:
        return None
    charset = charset.strip().lower()
    value = (
        _codec(CHARSET_ALIASES.get(charset, charset))
        or _codec(charset.replace("-", ""))
        or _codec(charset.replace("-", "_"))
    )
    return value.lower() if value else None


class EncodingDetector:
    """Suggests a number of possible encodings for a bytestring.

    Order of precedence:

    1. Encodings you specifically tell EncodingDetector to try first
    (the known_definite_encodings argument to the constructor).

    2. An encoding determined by sniffing the document's byte-order mark.

    3. An encoding declared within the bytestring itself, either in an
    XML declaration or, for HTML, in a <meta> tag.

    4. An encoding guessed through textual analysis by charset-normalizer
    or a similar library.

    5. UTF-8.

    6. Windows-1252.
    """

    def __init__(self, markup, known_definite_encodings=None, is_html=False, exclude_encodings=None):
        """Constructor.

        :param markup: Some markup in an unknown encoding.
        :param known_definite_encodings: Encodings to try first, in order. In
            HTTP terms, the charset of the Content-Type header.
        :param is_html: If True, look for a <meta> charset as well as an XML
            declaration.
        :param exclude_encodings: These encodings will not be tried, even if
            they otherwise would be.
        """
        self.known_definite_encodings = [e for e in known_definite_encodings or [] if e]
        self.exclude_encodings = {e.lower() for e in exclude_encodings or []}
        self.is_html = is_html
        self.markup, self.sniffed_encoding = self.strip_byte_order_mark(markup)

    def _usable(self, encoding, tried):
        """Should we even bother to try this encoding?

        :param tried: Encodings that have already been tried. This will be
            modified as a side effect.
        """
        if encoding is None:
            return False
        encoding = encoding.lower()
        if encoding in self.exclude_encodings or encoding in tried:
            return False
        tried.add(encoding)
        return True

    @property
    def encodings(self):
        """Yield a number of encodings that might work for this markup.

        :yield: A sequence of strings.
        """
        tried = set()
        for e in self.known_definite_encodings:
            if self._usable(e, tried):
                yield e
        if self._usable(self.sniffed_encoding, tried):
            yield self.sniffed_encoding
        declared = self.find_declared_encoding(self.markup, self.is_html)
        if self._usable(declared, tried):
            yield declared
        guessed = chardet_dammit(self.markup)
        if self._usable(guessed, tried):
            yield guessed
        for e in ("utf-8", "windows-1252"):
            if self._usable(e, tried):
                yield e

    @classmethod
    def strip_byte_order_mark(cls, data):
        """If a byte-order mark is present, strip it and return the encoding it implies.

        :param data: Some markup.
        :return: A 2-tuple (modified data, implied encoding)
        """
        for mark, encoding in (
            (codecs.BOM_UTF32_BE, "utf-32be"),
            (codecs.BOM_UTF32_LE, "utf-32le"),
            (codecs.BOM_UTF8, "utf-8"),
            (codecs.BOM_UTF16_BE, "utf-16be"),
            (codecs.BOM_UTF16_LE, "utf-16le"),
        ):
            if data.startswith(mark):
                return data[len(mark):], encoding
        return data, None

    @classmethod
    def find_declared_encoding(cls, markup, is_html=False):
        """Given a document, tries to find its declared encoding.

        An XML encoding is declared at the beginning of the document. An HTML
        encoding is declared in a <meta> tag, hopefully near the beginning of the
        document, so only the first few kilobytes are searched.
        """
        match = XML_ENCODING_RE.search(markup, endpos=1024)
        if match is None and is_html:
            match = HTML_META_RE.search(markup, endpos=max(2048, int(len(markup) * 0.05)))
        if match is None or not match.group(1):
            return None
        return match.group(1).decode("ascii", "replace").lower()


def decode_markup(markup, known_definite_encodings=None, is_html=True, exclude_encodings=None) -> str:
    """Convert markup bytes to a string.

    Text is returned unchanged. Bytes are decoded with the first encoding from
    `EncodingDetector` that works; if none does, UTF-8 is used with replacement
    characters.
    """
    if isinstance(markup, str):
        return markup
    detector = EncodingDetector(
        bytes(markup),
        known_definite_encodings=known_definite_encodings,
        is_html=is_html,
        exclude_encodings=exclude_encodings,
    )
    for encoding in detector.encodings:
        codec = find_codec(encoding)
        if codec is None:
            continue
        try:
            return detector.markup.decode(codec)
        except (UnicodeDecodeError, LookupError):
            log.debug("Markup is not valid %s", codec)
    log.warning(
        "Some characters could not be decoded, and were replaced with REPLACEMENT CHARACTER.",
    )
    return detector.markup.decode("utf-8", "replace")
