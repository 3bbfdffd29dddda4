"""klaw-guard: fluent runtime value guards for Python 3.13+.

Flat imports (preferred):
    from klaw_guard import guard, ValidationError, MissingValueError
    from klaw_guard import attempt, guarded, Ok, Err

Submodule imports (for organization):
    from klaw_guard.guard import ValueGuard
    from klaw_guard.errors import Invalid, ErrorKind
    from klaw_guard.patterns import Patterns
"""

# Configuration
from klaw_guard._config import GuardConfig, get_config, init, reset

# Logging
from klaw_guard._logging import configure_logging, get_logger

# Result adapters
from klaw_guard.decorators import attempt, guarded

# Errors
from klaw_guard.errors import ErrorKind, Invalid, MissingValueError, ValidationError

# Guards
from klaw_guard.guard import ValueGuard, guard

# Patterns
from klaw_guard.patterns import DEFAULT_PATTERNS, Patterns

# Result types
from klaw_guard.result import Err, Ok, Result

__all__ = [
    'DEFAULT_PATTERNS',
    'Err',
    'ErrorKind',
    'GuardConfig',
    'Invalid',
    'MissingValueError',
    'Ok',
    'Patterns',
    'Result',
    'ValidationError',
    'ValueGuard',
    'attempt',
    'configure_logging',
    'get_config',
    'get_logger',
    'guard',
    'guarded',
    'init',
    'reset',
]
