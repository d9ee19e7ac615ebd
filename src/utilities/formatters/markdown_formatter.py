"""
Formatting helpers turning authored topic text into HTML.

Topic prose (explanations, exercises, common mistakes) only uses a tiny
inline subset: ``**bold**``, ``inline `code` `` and escaped ``\\n`` line
breaks. Interview questions and answers are full Markdown, including fenced
code blocks.
"""
from __future__ import annotations

import re

import markdown
import markupsafe

_BOLD_PATTERN = re.compile(r"\*\*(.*?)\*\*")
_INLINE_CODE_PATTERN = re.compile(r"`([^`]+)`")
_ESCAPED_NEWLINE = "\\n"


def format_inline_markdown(text: str | None) -> markupsafe.Markup:
    """Render bold and inline code on HTML-escaped text."""
    if not text:
        return markupsafe.Markup("")
    html = str(markupsafe.escape(text))
    html = _BOLD_PATTERN.sub(r"<strong>\1</strong>", html)
    html = _INLINE_CODE_PATTERN.sub(r"<code>\1</code>", html)
    return markupsafe.Markup(html.replace(_ESCAPED_NEWLINE, "\n"))


def format_markdown(text: str | None) -> markupsafe.Markup:
    """Render a Markdown document (fenced code supported)."""
    if not text:
        return markupsafe.Markup("")
    source = text.replace(_ESCAPED_NEWLINE, "\n")
    return markupsafe.Markup(markdown.markdown(source, extensions=["fenced_code"]))
