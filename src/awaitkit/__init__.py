"""awaitkit: keyed awaitable combinators with Result and Option types.

Flat imports (preferred):
    from awaitkit import keyed_all, keyed_all_settled
    from awaitkit import Result, Ok, Err, Option, Some, Nothing
    from awaitkit import Fulfilled, Rejected, Settled

Submodule imports (for organization):
    from awaitkit.keyed import keyed_all
    from awaitkit.result import Ok, Err, result_try
    from awaitkit.option import Some, Nothing, option_wrap
    from awaitkit.guards import is_awaitable
"""

# Configuration
from awaitkit._config import AwaitkitConfig, get_config, init

# Logging
from awaitkit._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook

# Async helpers
from awaitkit.aio import sleep

# Lists
from awaitkit.arrays import filter_map, wrap_as_list

# Decorators
from awaitkit.decorators import safe, safe_async

# Errors
from awaitkit.errors import (
    AwaitkitError,
    NotInitializedError,
    OptionUnwrapError,
    ResultUnwrapError,
    UnwrapError,
)

# Keyed combinators
from awaitkit.keyed import keyed_all, keyed_all_settled
from awaitkit.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    option_is_none,
    option_is_some,
    option_map,
    option_or_else,
    option_or_raise,
    option_wrap,
)
from awaitkit.result import (
    Err,
    Ok,
    Result,
    collect,
    is_err,
    is_ok,
    result_map,
    result_map_err,
    result_or_else,
    result_try,
    result_try_async,
)
from awaitkit.settled import (
    Fulfilled,
    Rejected,
    Settled,
    from_result,
    is_fulfilled,
    is_rejected,
    settled_to_results,
    to_result,
)

__all__ = [
    # Config
    'AwaitkitConfig',
    # Errors
    'AwaitkitError',
    # Result types
    'Err',
    # Settled outcomes
    'Fulfilled',
    # Option types
    'Nothing',
    'NothingType',
    'NotInitializedError',
    'Ok',
    'Option',
    'OptionUnwrapError',
    'Rejected',
    'Result',
    'ResultUnwrapError',
    'Settled',
    'Some',
    'UnwrapError',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'collect',
    'configure_logging',
    # Lists
    'filter_map',
    'from_result',
    'get_config',
    'get_logger',
    'init',
    'is_err',
    'is_fulfilled',
    'is_ok',
    'is_rejected',
    # Keyed combinators
    'keyed_all',
    'keyed_all_settled',
    'option_is_none',
    'option_is_some',
    'option_map',
    'option_or_else',
    'option_or_raise',
    'option_wrap',
    'remove_log_hook',
    'result_map',
    'result_map_err',
    'result_or_else',
    'result_try',
    'result_try_async',
    # Decorators
    'safe',
    'safe_async',
    'settled_to_results',
    # Async helpers
    'sleep',
    'to_result',
    'wrap_as_list',
]
