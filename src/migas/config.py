"""ContextVar-based conversion configuration for Migas.

Provides thread-local configuration using Python's ContextVars (PEP 567).
``to_mdast`` reads the active config unless one is passed explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from migas import to_mdast
    from migas.config import ConvertConfig, convert_config_context

    with convert_config_context(ConvertConfig(checked="[X]")):
        mdast = to_mdast(tree)

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from migas.handlers import Handler


@dataclass(frozen=True, slots=True)
class ConvertConfig:
    """Immutable conversion configuration.

    Attributes:
        handlers: Per-tag handlers, overriding the built-in ones
        checked: Text used for a checked checkbox outside a list item head
        unchecked: Text used for an unchecked checkbox outside a list item head
        newlines: Keep line feeds when collapsing whitespace in text

    """

    handlers: Mapping[str, Handler] = field(default_factory=lambda: MappingProxyType({}))
    checked: str = "[x]"
    unchecked: str = "[ ]"
    newlines: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ConvertConfig":
        """Create ConvertConfig from a dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> ConvertConfig.from_dict({"checked": "[X]", "colour": "red"}).checked
            '[X]'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "handlers" in filtered:
            filtered["handlers"] = MappingProxyType(dict(filtered["handlers"]))
        return cls(**filtered)


_DEFAULT_CONFIG: ConvertConfig = ConvertConfig()

_convert_config: ContextVar[ConvertConfig] = ContextVar(
    "convert_config",
    default=_DEFAULT_CONFIG,
)


def get_convert_config() -> ConvertConfig:
    """Get the active conversion configuration for this context."""
    return _convert_config.get()


def set_convert_config(config: ConvertConfig) -> None:
    """Set the conversion configuration for the current context."""
    _convert_config.set(config)


def reset_convert_config() -> None:
    """Reset to the default configuration."""
    _convert_config.set(_DEFAULT_CONFIG)


@contextmanager
def convert_config_context(config: ConvertConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    """
    previous = _convert_config.get()
    _convert_config.set(config)
    try:
        yield
    finally:
        _convert_config.set(previous)


__all__ = [
    "ConvertConfig",
    "convert_config_context",
    "get_convert_config",
    "reset_convert_config",
    "set_convert_config",
]
