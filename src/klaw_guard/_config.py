"""Guard configuration: GuardConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from klaw_guard._logging import configure_logging
from klaw_guard.patterns import DEFAULT_PATTERNS, Patterns

__all__ = [
    'GuardConfig',
    'get_config',
    'init',
    'reset',
]

LOG_LEVEL_ENV = 'KLAW_GUARD_LOG_LEVEL'

_VALID_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class GuardConfig:
    """Process-wide settings for guards.

    Attributes:
        default_parameter_name: Name used in messages when a guard is created without one.
        patterns: Regexes behind the email, url and hostname checks.
        log_level: Logging level (e.g., "DEBUG"). None = silent, no failure events.
    """

    default_parameter_name: str = 'value'
    patterns: Patterns = field(default=DEFAULT_PATTERNS)
    log_level: str | None = None


_DEFAULT_CONFIG = GuardConfig()

# Global configuration (set by init())
_config: GuardConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from KLAW_GUARD_LOG_LEVEL, if set and recognised."""
    env_level = os.environ.get(LOG_LEVEL_ENV, '').upper()
    if not env_level:
        return None
    if env_level not in _VALID_LEVELS:
        logging.warning("Unknown %s value '%s', logging stays disabled", LOG_LEVEL_ENV, env_level)
        return None
    return env_level


def init(
    default_parameter_name: str | None = None,
    patterns: Patterns | None = None,
    log_level: str | None = None,
) -> GuardConfig:
    """Install the guard configuration.

    Args:
        default_parameter_name: Name for guards created without one. Defaults to "value".
        patterns: Custom email/url/hostname regexes. Defaults to DEFAULT_PATTERNS.
        log_level: Logging level ("DEBUG", "INFO", etc.). Falls back to
            KLAW_GUARD_LOG_LEVEL; None = silent.

    Returns:
        The GuardConfig that was set.

    Raises:
        ValueError: If log_level is not a standard logging level name.

    Example:
        ```python
        import klaw_guard

        klaw_guard.init(default_parameter_name='input', log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    if log_level is not None:
        resolved_level = log_level.upper()
        if resolved_level not in _VALID_LEVELS:
            raise ValueError(f"Unknown log level '{log_level}', expected one of {', '.join(_VALID_LEVELS)}")
    else:
        resolved_level = _detect_log_level()

    _config = GuardConfig(
        default_parameter_name=default_parameter_name or _DEFAULT_CONFIG.default_parameter_name,
        patterns=patterns if patterns is not None else DEFAULT_PATTERNS,
        log_level=resolved_level,
    )

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> GuardConfig:
    """Get the current configuration, or the defaults if init() was never called."""
    if _config is None:
        return _DEFAULT_CONFIG
    return _config


def reset() -> None:
    """Drop any installed configuration and go back to the defaults."""
    global _config  # noqa: PLW0603
    _config = None
