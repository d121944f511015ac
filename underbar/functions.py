"""
function decorators.

each decorator keeps its state in a small object captured by the returned
wrapper, so two wraps of the same function never share anything.
"""
from __future__ import annotations

import logging
import numbers
import threading
from functools import wraps
from .types import *
from .timers import DEFAULT_TIMER, TimerFacility, TimerHandle

logger = logging.getLogger(__name__)


def _name(func: Callable) -> str:
    return getattr(func, "__name__", repr(func))


def _check_wait(wait_ms: Any) -> float:
    if isinstance(wait_ms, bool) or not isinstance(wait_ms, numbers.Real):
        raise InvalidArgument(f"wait must be a number of milliseconds, got {type(wait_ms).__name__}")
    if wait_ms < 0:
        raise InvalidArgument(f"wait must be non-negative, got {wait_ms}")
    return float(wait_ms)


# --- once ---

class _OnceState:
    __slots__ = ('fired', 'result')

    def __init__(self):
        self.fired = False
        self.result = None


def once(func: Callable[..., T]) -> Callable[..., T]:
    """
    returns a function that calls func only the first time it is called.
    later calls, whatever their arguments, return that first result.
    a first call that raises does not count, so the next call tries again.
    """
    state = _OnceState()

    @wraps(func)
    def wrapper(*args, **kwargs):
        if not state.fired:
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.debug(f"once({_name(func)}) failed, will retry on next call: {e}")
                raise
            state.result = result
            state.fired = True
        return state.result

    return wrapper


# --- memoize ---

def memoize(func: Callable[..., T]) -> Callable[..., T]:
    """
    caches func's results keyed on its first positional argument.

    the key must be a primitive (None, bool, number, str or bytes). any
    further positional arguments are passed through but take no part in the
    key. keyword arguments and non-primitive keys raise UnsupportedKey.
    """
    cache: Dict[Tuple[type, Any], T] = {}

    @wraps(func)
    def wrapper(*args, **kwargs):
        if kwargs:
            raise UnsupportedKey(f"memoize does not support keyword arguments: {sorted(kwargs)}")
        if not args:
            raise UnsupportedKey("memoize needs a first positional argument to key on")
        if not is_primitive(args[0]):
            raise UnsupportedKey(f"memoize keys must be primitive, got {type(args[0]).__name__}")

        # the type is part of the key so True and 1 stay apart
        key = (type(args[0]), args[0])
        if key in cache:
            return cache[key]
        logger.debug(f"memoize({_name(func)}) miss for {args[0]!r}")
        result = func(*args)
        cache[key] = result
        return result

    return wrapper


# --- throttle ---

class _ThrottleState:
    def __init__(self):
        # reentrant so func may call its own throttled wrapper
        self.lock = threading.RLock()
        self.window_start: Optional[float] = None
        self.pending: Optional[TimerHandle] = None
        self.generation = 0
        self.latest: Tuple[tuple, dict] = ((), {})
        self.result = None


def throttle(func: Callable[..., T], wait_ms: float, *,
             timer: Optional[TimerFacility] = None) -> Callable[..., Optional[T]]:
    """
    returns a function that calls func at most once per wait_ms window.

    the first call, and any call after the window has elapsed, runs func
    right away and opens a new window. calls inside an open window arm a
    single trailing call for the end of the window, which runs func with the
    most recent arguments. every call returns the latest result.
    """
    wait_ms = _check_wait(wait_ms)
    timer = timer if timer is not None else DEFAULT_TIMER
    state = _ThrottleState()

    def run(args: tuple, kwargs: dict) -> None:
        if state.pending is not None:
            state.pending.cancel()
            state.pending = None
            logger.debug(f"throttle({_name(func)}) cancelled pending trailing call")
        state.window_start = timer.now()
        state.result = func(*args, **kwargs)

    def make_trailing(generation: int) -> Callable[[], None]:
        def trailing():
            with state.lock:
                # a direct call may have cancelled this timer after it went off
                if state.pending is None or state.generation != generation:
                    return
                state.pending = None
                args, kwargs = state.latest
                logger.debug(f"throttle({_name(func)}) running trailing call")
                try:
                    run(args, kwargs)
                except Exception as e:
                    logger.error(f"throttle({_name(func)}) trailing call failed: {e}", exc_info=True)
                    raise
        return trailing

    @wraps(func)
    def wrapper(*args, **kwargs):
        with state.lock:
            now = timer.now()
            if state.window_start is None or now - state.window_start >= wait_ms:
                run(args, kwargs)
            else:
                state.latest = (args, kwargs)
                if state.pending is None:
                    remaining = state.window_start + wait_ms - now
                    state.generation += 1
                    state.pending = timer.schedule(remaining, make_trailing(state.generation))
                    logger.debug(f"throttle({_name(func)}) trailing call armed in {remaining:.1f}ms")
            return state.result

    return wrapper


# --- delay ---

def delay(func: Callable[..., Any], wait_ms: float, *args: Any,
          timer: Optional[TimerFacility] = None, **kwargs: Any) -> TimerHandle:
    """call func(*args, **kwargs) after wait_ms; returns a cancellable handle"""
    wait_ms = _check_wait(wait_ms)
    timer = timer if timer is not None else DEFAULT_TIMER
    return timer.schedule(wait_ms, lambda: func(*args, **kwargs))
