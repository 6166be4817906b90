"""ContextVar-based engine configuration for mathspan.

Provides context-local configuration using Python's ContextVars (PEP 567).
The scanner, validator and mutation operators read the active config on
every call, so a host editor can switch delimiters per document view
without threading a config object through each call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from mathspan import scan
    from mathspan.config import MathConfig, math_config_context

    spans = scan("Euler: $e^{i\\pi} + 1 = 0$")  # default "$" delimiter

    with math_config_context(MathConfig(delimiter="%")):
        spans = scan("Euler: %e^{i\\pi} + 1 = 0%")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from mathspan.errors import ConfigError

# Characters that would collide with the payload's own structure
_RESERVED_DELIMITERS = frozenset("{}\\")


@dataclass(frozen=True, slots=True)
class MathConfig:
    """Immutable engine configuration.

    Attributes:
        delimiter: Single-character inline math marker. The block marker is
            the same character doubled.
        announce_transitions: Whether editing sessions forward start/commit/
            cancel messages to their injected announcer.

    Raises:
        ConfigError: If ``delimiter`` is not exactly one non-whitespace
            character string, or is a brace or backslash.

    """

    delimiter: str = "$"
    announce_transitions: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str):
            raise ConfigError(
                "delimiter", f"expected a string, got {type(self.delimiter).__name__}"
            )
        if len(self.delimiter) != 1:
            raise ConfigError("delimiter", f"expected one character, got {self.delimiter!r}")
        if self.delimiter.isspace():
            raise ConfigError("delimiter", "whitespace cannot delimit math")
        if self.delimiter in _RESERVED_DELIMITERS:
            raise ConfigError("delimiter", f"{self.delimiter!r} is reserved by LaTeX grouping")

    @property
    def block_delimiter(self) -> str:
        """Double marker used for block (display) math."""
        return self.delimiter * 2

    @classmethod
    def from_dict(cls, config_dict: dict) -> "MathConfig":
        """Create MathConfig from dictionary.

        Useful when settings come from an editor preferences file.
        Unknown keys are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                MathConfig attribute names.

        Returns:
            New MathConfig instance with values from dict.

        Example:
            >>> config = MathConfig.from_dict({"delimiter": "%", "theme": "dark"})
            >>> config.block_delimiter
            '%%'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: MathConfig = MathConfig()

_math_config: ContextVar[MathConfig] = ContextVar(
    "math_config",
    default=_DEFAULT_CONFIG,
)


def get_math_config() -> MathConfig:
    """Get current engine configuration (context-local)."""
    return _math_config.get()


def set_math_config(config: MathConfig) -> None:
    """Set engine configuration for current context.

    Args:
        config: MathConfig instance to use for this context.

    """
    _math_config.set(config)


def reset_math_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton.

    """
    _math_config.set(_DEFAULT_CONFIG)


@contextmanager
def math_config_context(config: MathConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: MathConfig to use within the context.

    Yields:
        None

    Example:
        >>> with math_config_context(MathConfig(delimiter="%")):
        ...     spans = scan("%x%")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _math_config.get()
    _math_config.set(config)
    try:
        yield
    finally:
        _math_config.set(previous)


__all__ = [
    "MathConfig",
    "get_math_config",
    "set_math_config",
    "reset_math_config",
    "math_config_context",
]
