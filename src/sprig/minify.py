"""Markup minification, handed over to minify-html."""
from __future__ import annotations

import asyncio
import re
from collections.abc import Mapping

import minify_html
from pydantic import ValidationError

from .errors import InvalidArgument
from .models import Record

__all__ = ["MinifyOptions", "Minifier", "default_minifier"]


class MinifyOptions(Record, extra="forbid", strict=True):
    """Settings for a minification.

    :param collapse_whitespace: Collapse runs of whitespace in text. minify-html
        always does this, so turning it off skips minify-html altogether and only
        comments are removed. That is a plain text scan, not a parse: comment
        lookalikes inside `<script>`, `<style>`, `<textarea>` and `<title>` are
        left alone, but one inside an attribute value is still removed.
    :param html5: Treat the markup as HTML5 and drop the tags HTML5 lets you
        leave out (closing tags, `<html>` and `<head>` opening tags). Off by
        default so the output stays valid for older parsers.
    :param keep_comments: Keep `<!-- -->` comments.
    :param minify_css: Also minify `<style>` contents and `style` attributes.
    :param minify_js: Also minify `<script>` contents.
    :param remove_processing_instructions: Drop `<?...?>` instructions.
    """

    collapse_whitespace: bool = True
    html5: bool = False
    keep_comments: bool = False
    minify_css: bool = False
    minify_js: bool = False
    remove_processing_instructions: bool = False

    @classmethod
    def coerce(cls, options) -> MinifyOptions:
        """Accept a MinifyOptions, a mapping of its fields, or None for the defaults."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            try:
                return cls.model_validate(dict(options))
            except ValidationError as e:
                raise InvalidArgument(f"Invalid minify options: {e}") from e
        raise InvalidArgument("Expected options to be a MinifyOptions or a mapping.")

    def minify_html_kwargs(self) -> dict[str, bool]:
        return dict(
            keep_closing_tags=not self.html5,
            keep_html_and_head_opening_tags=not self.html5,
            keep_comments=self.keep_comments,
            minify_css=self.minify_css,
            minify_js=self.minify_js,
            remove_processing_instructions=self.remove_processing_instructions,
        )


class Minifier:
    """Runs minify-html off the event loop."""

    # Text inside these elements is never a comment, so they are matched whole
    # and put back as they are.
    COMMENT_RE = re.compile(
        r"(<(script|style|textarea|title)\b.*?</\2\s*>)|<!--.*?-->",
        re.S | re.I,
    )

    async def minify(self, markup: str, options=None) -> str:
        """Minify some markup.

        :param markup: The markup, as a string.
        :param options: A MinifyOptions, a mapping of its fields, or None.
        """
        if not isinstance(markup, str):
            raise InvalidArgument("Expected markup to be a string.")
        options = MinifyOptions.coerce(options)
        if not options.collapse_whitespace:
            if options.keep_comments:
                return markup
            return self.COMMENT_RE.sub(lambda m: m.group(1) or "", markup)
        return await asyncio.to_thread(
            minify_html.minify,
            markup,
            **options.minify_html_kwargs(),
        )


default_minifier = Minifier()
