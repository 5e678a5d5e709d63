from .option import Option, Some, NONE, some, none, from_nullable
from .option_e import OptionE, SomeE, NoneE, some_e
from .combinators import (
    some_when,
    none_when,
    some_not_null,
    to_option,
    some_or_exception,
    some_not_null_or_exception,
    flatten,
    value_or_exception,
    match,
    match_cause,
    map,
    flat_map,
)
from .errors import OptionError, ArgumentError
from .config import OptionConfig, get_config, configure, use_config, get_logger
from .logger import ConsoleLogger
