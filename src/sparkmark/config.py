"""ContextVar-based render configuration for sparkmark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per render call, read by every pipeline stage in the
context. One engine serves both the full chat/assistant profile and the
reduced inbox-digest profile; the difference is only which config is active.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Full profile (default)
    blocks = render(text)

    # Reduced digest profile
    blocks = render(text, config=RenderConfig.digest())

    # Or use the context manager around lower-level stages
    with render_config_context(RenderConfig(equations_enabled=False)):
        lines = classify(text)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Iterator

from sparkmark.errors import ConfigError


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        equations_enabled: Extract $$block$$ and $inline$ equations.
            When False, dollar signs are literal text.
        code_fences_enabled: Treat ``` lines as code fence delimiters.
            When False, fence lines are ordinary paragraph text.
        underscore_italic_enabled: Treat _text_ as italic. Off by
            default; the digest profile turns it on.

    """

    equations_enabled: bool = True
    code_fences_enabled: bool = True
    underscore_italic_enabled: bool = False

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise ConfigError(f.name, value)

    @classmethod
    def digest(cls) -> "RenderConfig":
        """Reduced profile for digest bodies: text formatting only."""
        return cls(
            equations_enabled=False,
            code_fences_enabled=False,
            underscore_italic_enabled=True,
        )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "equations_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.equations_enabled
            False

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: RenderConfig to use within the context.

    Example:
        >>> with render_config_context(RenderConfig.digest()):
        ...     blocks = render("$x$")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
