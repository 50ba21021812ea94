# topmark:header:start
#
#   project      : TokMark
#   file         : themes.py
#   file_relpath : src/tokmark/themes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in style configurations.

Themes are plain style configurations (nested dicts), built fresh on every call
so callers may extend them freely:

- ``ansi``: terminal colors rendered with ``yachalk``. When chalk detects no
  color support the surrounds are empty and the source is emitted unchanged.
- ``brackets``: plain-text markers, handy to inspect which token types a
  tokenizer reports.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final

from yachalk import ChalkFactory, ColorMode, chalk

from tokmark.style.model import KEY_AFTER, KEY_BEFORE, KEY_DEFAULT

if TYPE_CHECKING:
    from collections.abc import Callable

_SENTINEL: Final[str] = "\x00"


def surround_from_style(style: Callable[[str], str]) -> dict[str, str]:
    """Return the ``_before``/``_after`` pair a chalk style wraps text with."""
    before, _, after = style(_SENTINEL).partition(_SENTINEL)
    return {KEY_BEFORE: before, KEY_AFTER: after}


def chalk_for(color: bool | None = None) -> ChalkFactory:
    """Return a chalk instance for an explicit color decision.

    ``None`` keeps the shared instance, which detects color support on stdout.
    """
    if color is None:
        return chalk
    return ChalkFactory(ColorMode.Basic16 if color else ColorMode.AllOff)


def ansi_theme(color: bool | None = None) -> dict[str, Any]:
    """Return the terminal color theme.

    Args:
        color (bool | None): Force escape codes on (True) or off (False); None
            lets chalk detect whether stdout supports color.
    """
    palette: ChalkFactory = chalk_for(color)
    return {
        "Keyword": {
            KEY_DEFAULT: surround_from_style(palette.blue),
            "function": surround_from_style(palette.magenta.bold),
            "def": surround_from_style(palette.magenta.bold),
            "class": surround_from_style(palette.magenta.bold),
            "return": surround_from_style(palette.cyan),
        },
        "Identifier": {
            "undefined": surround_from_style(palette.red),
            "self": surround_from_style(palette.italic),
            "this": surround_from_style(palette.italic),
        },
        "Boolean": surround_from_style(palette.yellow),
        "Null": surround_from_style(palette.yellow),
        "Numeric": surround_from_style(palette.yellow),
        "String": surround_from_style(palette.green),
        "Template": surround_from_style(palette.green),
        "RegularExpression": surround_from_style(palette.cyan),
        "Line": surround_from_style(palette.gray),
        "Block": surround_from_style(palette.gray),
    }


def brackets_theme(color: bool | None = None) -> dict[str, Any]:
    """Return the plain-text marker theme (``color`` has no effect)."""
    return {
        "Keyword": "[:]",
        "Boolean": "<:>",
        "Null": "<:>",
        "Numeric": "<:>",
        "String": "{:}",
        "Template": "{:}",
        "RegularExpression": "{:}",
        "Line": "«:»",
        "Block": "«:»",
    }


THEMES: Final[dict[str, Callable[[bool | None], dict[str, Any]]]] = {
    "ansi": ansi_theme,
    "brackets": brackets_theme,
}


def theme_names() -> tuple[str, ...]:
    """Return the sorted built-in theme names."""
    return tuple(sorted(THEMES))


def extend_style(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new style with ``overrides`` layered on top of ``base``.

    Tables present on both sides are merged recursively; any other value in
    ``overrides`` replaces the one in ``base``. Neither input is modified.
    """
    merged: dict[str, Any] = dict(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = extend_style(current, value)
        else:
            merged[key] = value
    return merged


def get_theme(name: str, *, color: bool | None = None) -> dict[str, Any]:
    """Return a fresh copy of the built-in theme ``name``.

    Args:
        name (str): Theme name.
        color (bool | None): Color decision passed to the theme (see `ansi_theme`).

    Raises:
        KeyError: If ``name`` is not a built-in theme.
    """
    try:
        factory = THEMES[name]
    except KeyError:
        raise KeyError(f"Unknown theme {name!r} (known: {', '.join(theme_names())})") from None
    return factory(color)
