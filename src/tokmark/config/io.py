# topmark:header:start
#
#   project      : TokMark
#   file         : io.py
#   file_relpath : src/tokmark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render style configurations as TOML.

A style file maps token types to tables or shorthand strings:

```toml
Keyword = "[:]"

[String]
_before = "<"
_after = ">"

[Identifier]
_default = ":"
console = "(:)"
```

Inside ``pyproject.toml`` the same content lives under ``[tool.tokmark.style]``.

Parsing is done with `tomlkit` and returned as plain `dict` structures. Unlike
the lenient loaders of a header tool, style loading fails loudly: a broken style
file raises [`ConfigError`][tokmark.errors.ConfigError].
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tokmark.config.logging import get_logger
from tokmark.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from tokmark.config.logging import TokmarkLogger

logger: TokmarkLogger = get_logger(__name__)

TomlTable = dict[str, Any]

PYPROJECT_TOML: Final[str] = "pyproject.toml"
PYPROJECT_STYLE_SECTION: Final[tuple[str, ...]] = ("tool", "tokmark", "style")


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        raise ConfigError(f"Cannot read style file {path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in style file {path}: {exc}") from exc

    data: Any = doc.unwrap()
    return cast("TomlTable", data) if isinstance(data, dict) else {}


def extract_style_table(data: TomlTable, *, pyproject: bool) -> TomlTable:
    """Return the style configuration part of a parsed TOML document.

    Args:
        data (TomlTable): Parsed TOML document.
        pyproject (bool): If True, read the ``[tool.tokmark.style]`` table.

    Returns:
        TomlTable: The style configuration (empty if the section is absent).

    Raises:
        ConfigError: If the style section exists but is not a table.
    """
    if not pyproject:
        return data

    table: Any = data
    for key in PYPROJECT_STYLE_SECTION:
        if not isinstance(table, Mapping):
            break
        table = table.get(key)
    if table is None:
        logger.info("No [%s] section found", ".".join(PYPROJECT_STYLE_SECTION))
        return {}
    if not isinstance(table, Mapping):
        raise ConfigError(
            f"[{'.'.join(PYPROJECT_STYLE_SECTION)}] must be a table",
            value=table,
        )
    return dict(table)


def load_style_file(path: Path) -> TomlTable:
    """Load a style configuration from a TOML style file or ``pyproject.toml``.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    data: TomlTable = load_toml_dict(path)
    style: TomlTable = extract_style_table(data, pyproject=path.name == PYPROJECT_TOML)
    logger.debug("Loaded style configuration with %d top-level key(s) from %s", len(style), path)
    return style


def _check_serializable(value: object, path: tuple[str, ...]) -> None:
    if isinstance(value, Mapping):
        for key, child in cast("Mapping[str, object]", value).items():
            _check_serializable(child, (*path, str(key)))
    elif not isinstance(value, str):
        raise ConfigError(
            "Only strings and tables can be written to a style file",
            value=value,
            path=path,
        )


def to_toml(style: Mapping[str, Any]) -> str:
    """Serialize a raw style configuration to TOML text.

    Raises:
        ConfigError: If the configuration holds callbacks or other non-TOML values.
    """
    _check_serializable(style, ())
    return cast("str", cast("Any", tomlkit).dumps(dict(style)))
