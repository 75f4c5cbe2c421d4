"""HTML entity escaping and unescaping.

Only five characters take part: ``&``, ``<``, ``>``, ``"`` and ``'``. Escaping
maps them to ``&amp;``, ``&lt;``, ``&gt;``, ``&quot;`` and ``&#39;``. Unescaping
maps those entities back, and also accepts zero-padded forms of the
apostrophe reference such as ``&#039;`` or ``&#000039;``. No other named or
numeric reference is touched (``&#96;`` and ``&#x2F;`` pass through as is).

Both directions are a single left-to-right pass over the text, so
``unescape("&amp;lt;")`` yields ``"&lt;"`` and not ``"<"``.

``unescape(escape(s)) == s`` holds for every string. The reverse does not,
because ``escape`` always emits the canonical ``&#39;``.

Though ``>`` is escaped for symmetry, characters like ``>`` and ``/`` have no
special meaning in HTML unless they are part of a tag or an unquoted attribute
value. Always quote attribute values when writing HTML.

Examples:
    >>> from dashkit.strings.html import escape, unescape
    >>> escape("fred, barney, & pebbles")
    'fred, barney, &amp; pebbles'
    >>> unescape("fred, barney, &amp; pebbles")
    'fred, barney, & pebbles'
"""

import re
import typing as tp

from dashkit.logger.logger import logger

__all__ = [
    "escape",
    "unescape",
    "HTML_ESCAPES",
    "HTML_UNESCAPES",
]

HTML_ESCAPES: tp.Mapping[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

HTML_UNESCAPES: tp.Mapping[str, str] = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
}

# Compiled once at import and never mutated, safe to share across threads.
_UNESCAPED_HTML = re.compile(r"""[&<>"']""")
_ESCAPED_HTML = re.compile(r"&(?:amp|lt|gt|quot|#0*39);")


def _escape_match(match: re.Match) -> str:
    return HTML_ESCAPES[match.group(0)]


def _unescape_match(match: re.Match) -> str:
    # Anything not in the named table is an apostrophe reference.
    return HTML_UNESCAPES.get(match.group(0), "'")


def escape(value: str) -> str:
    """Convert ``&``, ``<``, ``>``, ``"`` and ``'`` in ``value`` to HTML entities.

    No other characters are escaped.

    Args:
        value: The string to escape.

    Returns:
        The escaped string, or ``value`` itself when nothing needs escaping.
    """
    if not _UNESCAPED_HTML.search(value):
        logger.debug("escape: nothing to escape, returning input unchanged")
        return value
    return _UNESCAPED_HTML.sub(_escape_match, value)


def unescape(value: str) -> str:
    """The inverse of :func:`escape`.

    Converts ``&amp;``, ``&lt;``, ``&gt;``, ``&quot;`` and ``&#39;`` (with any
    number of leading zeros before ``39``) in ``value`` back to the characters
    they stand for. One pass only: entities produced by the rewrite are not
    rewritten again.

    Args:
        value: The string to unescape.

    Returns:
        The unescaped string, or ``value`` itself when no entity is found.
    """
    if not _ESCAPED_HTML.search(value):
        logger.debug("unescape: no entities found, returning input unchanged")
        return value
    return _ESCAPED_HTML.sub(_unescape_match, value)
