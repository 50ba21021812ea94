# topmark:header:start
#
#   project      : TokMark
#   file         : registry.py
#   file_relpath : src/tokmark/tokenizers/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of tokenizer adapters.

Adapters are registered by class under their ``name``; lookups by name return a
fresh instance with default options, lookups by path match the file extension
against each adapter's ``extensions``.

Notes:
    * Built-in adapters (``javascript``, ``python``) are registered at import time.
    * `register_tokenizer()` replaces an existing registration with the same name,
      which lets plugins and tests override a built-in.
"""

from __future__ import annotations

from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING

from tokmark.config.logging import get_logger
from tokmark.tokenizers.javascript import JavaScriptTokenizer
from tokmark.tokenizers.python import PythonTokenizer

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from tokmark.config.logging import TokmarkLogger
    from tokmark.tokenizers.base import Tokenizer

logger: TokmarkLogger = get_logger(__name__)

DEFAULT_TOKENIZER: str = JavaScriptTokenizer.name

_lock = RLock()
_registry: dict[str, type[Tokenizer]] = {}


def register_tokenizer(cls: type[Tokenizer]) -> type[Tokenizer]:
    """Register a tokenizer adapter class (usable as a class decorator).

    Args:
        cls (type[Tokenizer]): Adapter class with ``name`` and ``extensions``.

    Returns:
        type[Tokenizer]: ``cls``, unchanged.
    """
    with _lock:
        if cls.name in _registry:
            logger.debug("Replacing tokenizer registration for %s", cls.name)
        _registry[cls.name] = cls
    return cls


def unregister_tokenizer(name: str) -> bool:
    """Remove a registration; return True if it existed."""
    with _lock:
        return _registry.pop(name, None) is not None


def registered_tokenizers() -> Mapping[str, type[Tokenizer]]:
    """Return a read-only view of registered adapter classes keyed by name."""
    with _lock:
        return MappingProxyType(dict(_registry))


def get_tokenizer(name: str) -> Tokenizer:
    """Return a new adapter instance for ``name``.

    Raises:
        KeyError: If no adapter is registered under ``name``.
    """
    with _lock:
        try:
            cls = _registry[name.lower()]
        except KeyError:
            known = ", ".join(sorted(_registry))
            raise KeyError(f"Unknown tokenizer {name!r} (known: {known})") from None
    return cls()


def tokenizer_name_for_path(path: Path) -> str | None:
    """Return the name of the adapter handling ``path``'s extension, if any."""
    suffix: str = path.suffix.lower()
    with _lock:
        for name, cls in _registry.items():
            if suffix in cls.extensions:
                return name
    return None


for _cls in (JavaScriptTokenizer, PythonTokenizer):
    register_tokenizer(_cls)
