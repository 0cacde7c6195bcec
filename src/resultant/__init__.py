"""resultant: a result algebra (Ok | Err | Nil) for Python 3.13+.

Flat imports (preferred):
    from resultant import ok, maybe, err, result, task, flow
    from resultant import Ok, Err, Nil, Result, Pending, wrap, unwrap

Submodule imports (for organization):
    from resultant.result import Ok, Err, Nil
    from resultant.compose import flow, task
    from resultant.guards import is_defined, is_mutable
"""

# Async
from resultant.async_ import Pending

# Clone helper
from resultant.clone import try_clone

# Composition
from resultant.compose import flow, result, task

# Configuration
from resultant._config import Config, get_config, init

# Decorators
from resultant.decorators import safe, safe_async

# Errors
from resultant.errors import ConsumedError, Failure, ResultError

# Predicates
from resultant.guards import (
    is_async_function,
    is_defined,
    is_error,
    is_function,
    is_instance_of,
    is_mutable,
)

# Logging
from resultant._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    log,
    remove_log_hook,
)

# Normalization
from resultant.normalize import is_result, unwrap, wrap

# Recipes
from resultant.recipes import retry

# Result types
from resultant.result import (
    Err,
    Nil,
    NilType,
    Ok,
    Result,
    Tag,
    err,
    maybe,
    ok,
)

__all__ = [
    # Configuration
    'Config',
    # Errors
    'ConsumedError',
    # Result types
    'Err',
    'Failure',
    'Nil',
    'NilType',
    'Ok',
    # Async
    'Pending',
    'Result',
    'ResultError',
    'Tag',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'err',
    # Composition
    'flow',
    'get_config',
    'get_logger',
    'init',
    # Predicates
    'is_async_function',
    'is_defined',
    'is_error',
    'is_function',
    'is_instance_of',
    'is_mutable',
    'is_result',
    'log',
    'maybe',
    'ok',
    'remove_log_hook',
    'result',
    # Recipes
    'retry',
    # Decorators
    'safe',
    'safe_async',
    'task',
    # Clone helper
    'try_clone',
    # Normalization
    'unwrap',
    'wrap',
]
