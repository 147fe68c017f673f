"""okerr: Type-safe Ok/Err Result type for Python 3.13+.

Flat imports (preferred):
    from okerr import Result, Ok, Err, make_ok, make_err, safe

Submodule imports (for organization):
    from okerr.result import Ok, Err, Result
"""

# Configuration
from okerr._config import OkerrConfig, get_config, init

# Decorators
from okerr.decorators import safe

# Errors
from okerr.errors import UnwrapError

# Types
from okerr.result import (
    UNIT,
    Err,
    Ok,
    Result,
    Unit,
    collect,
    make_err,
    make_ok,
)

__all__ = [
    'UNIT',
    'Err',
    'Ok',
    'OkerrConfig',
    'Result',
    'Unit',
    'UnwrapError',
    'collect',
    'get_config',
    'init',
    'make_err',
    'make_ok',
    'safe',
]
