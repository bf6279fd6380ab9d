from .option import (
    Option,
    Some,
    NONE,
    MISSING,
    some,
    none,
    from_nullable,
    is_some,
    is_none,
    unwrap_or,
    to_nullable,
    to_missing,
    map,
    flat_map,
    match,
)
from .logger import ConsoleLogger, trace
