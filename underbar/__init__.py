r"""
'     _   _ _  _ ___  ___ ___ ___   _   ___
'    | | | | \| |   \| __| _ \ _ ) /_\ | _ \
'    | |_| | .` | |) | _||   / _ \/ _ \|   /
'     \___/|_|\_|___/|___|_|_\___/_/ \_\_|_\
'
"""
import logging

# expose the traversal engine
from .engine import (
    each,
    index_of,
    map,
    filter,
    reject,
    uniq,
    reduce,
    contains,
    every,
    some,
    identity,
    first,
    last,
    pluck,
    invoke
)

# expose the composite operations
from .composite import (
    sort_by,
    zip,
    flatten,
    intersection,
    difference,
    shuffle
)

# expose the object helpers
from .objects import extend, defaults

# expose the function decorators
from .functions import once, memoize, throttle, delay
from .timers import ThreadingTimer, TimerFacility, TimerHandle, DEFAULT_TIMER

# expose the fluent wrapper
from .enumerable import Enumerable
from .factories import from_iterable, from_mapping, empty, bar

# expose supporting types and errors
from .types import (
    MISSING,
    Projection,
    FieldSelector,
    UnderbarError,
    InvalidArgument,
    TypeMismatch,
    UnsupportedKey
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "each",
    "index_of",
    "map",
    "filter",
    "reject",
    "uniq",
    "reduce",
    "contains",
    "every",
    "some",
    "identity",
    "first",
    "last",
    "pluck",
    "invoke",
    "sort_by",
    "zip",
    "flatten",
    "intersection",
    "difference",
    "shuffle",
    "extend",
    "defaults",
    "once",
    "memoize",
    "throttle",
    "delay",
    "ThreadingTimer",
    "TimerFacility",
    "TimerHandle",
    "DEFAULT_TIMER",
    "Enumerable",
    "from_iterable",
    "from_mapping",
    "empty",
    "bar",
    "MISSING",
    "Projection",
    "FieldSelector",
    "UnderbarError",
    "InvalidArgument",
    "TypeMismatch",
    "UnsupportedKey"
]
