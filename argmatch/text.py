# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Text helpers used for name matching and completion.

Functions:
- normalize_keep_case: Trim, then replace underscores and whitespace runs with `-`.
- normalize: `normalize_keep_case` followed by case folding.
- strip_markup: Remove legacy `§x` / `&x` color codes and rich style tags.

Matching and completion both normalize user input and candidate names with the
same functions, so "Jon Doe", "jon_doe" and " JON-DOE " are all equivalent.
"""
import re

from rich.errors import StyleSyntaxError
from rich.style import Style

_WHITESPACE = re.compile(r"\s+")
_LEGACY_COLOR_CODES = re.compile(r"[§&][0-9a-fk-orx]", re.IGNORECASE)
_MARKUP_TAG = re.compile(r"\[(/?)([^\[\]]*)\]")


def normalize_keep_case(text: str) -> str:
    """Normalize whitespace and underscores but keep the original case."""
    normalized = text.strip().replace("_", "-")
    return _WHITESPACE.sub("-", normalized)


def normalize(text: str) -> str:
    """Normalize the given text for case-insensitive comparison."""
    return normalize_keep_case(text).casefold()


def _is_style_tag(match: re.Match) -> bool:
    closing, content = match.group(1), match.group(2).strip()
    if not content:
        return bool(closing)
    try:
        Style.parse(content)
    except StyleSyntaxError:
        return False
    return True


def _strip_style_tag(match: re.Match) -> str:
    return "" if _is_style_tag(match) else match.group(0)


def strip_markup(text: str) -> str:
    """
    Strip color codes and markup from a display label.

    Legacy section-sign and ampersand color codes are always removed. A bracketed
    tag is removed only if it is a rich style tag (e.g. `[bold green]`, `[/]`,
    `[/bold]`); any other bracketed text, such as `[vip]`, is part of the label
    and is kept.
    """
    if not text:
        return text
    uncolored = _LEGACY_COLOR_CODES.sub("", text)
    if "[" not in uncolored:
        return uncolored
    return _MARKUP_TAG.sub(_strip_style_tag, uncolored)
