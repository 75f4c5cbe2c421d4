"""Text helpers."""

from dashkit.strings.html import escape, unescape

__all__ = ["escape", "unescape"]
