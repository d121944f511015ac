import sys
import time
from functools import wraps
from typing import List, Dict, Any, Callable, Type

# registered cases and the outcome of the latest run
_registry: Dict[str, List[Dict[str, Any]]] = {
    'cases': [],
    'outcomes': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'

_ANSI = {
    'green': '\033[92m',
    'red': '\033[91m',
    'yellow': '\033[93m',
    'blue': '\033[94m',
    'grey': '\033[90m',
}
_RESET = '\033[0m'


def _paint(text: Any, colour: str) -> str:
    return f"{_ANSI[colour]}{text}{_RESET}"


class SuiteAssertionError(AssertionError):
    """raised by assert_that; anything else a test raises is reported as an error"""
    pass


# --- registration and assertions ---

def test(description: str) -> Callable:
    """register the decorated function as a case, reported under description"""

    def decorator(func: Callable) -> Callable:
        _registry['cases'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable, *args, **kwargs) -> BaseException:
    """call func and fail unless it raises error_type; the raised error is returned"""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise SuiteAssertionError(f"expected {error_type.__name__} from {getattr(func, '__name__', func)}")


# --- running ---

def _run_case(func: Callable) -> Any:
    """run one case; returns (error or None, elapsed ms)"""
    started = time.perf_counter()
    error = None
    try:
        func()
    except SuiteAssertionError as e:
        error = f"assertion failed: {e}"
    except Exception as e:
        error = f"{type(e).__name__}: {e}"
    return error, (time.perf_counter() - started) * 1000


def run(title: str = "test run") -> bool:
    """run every registered case, print a report and return True if all passed"""
    print("\n" + _paint(f"--- starting: {title} ---", 'blue'))
    started = time.perf_counter()
    outcomes = _registry['outcomes'] = []

    for case in _registry['cases']:
        error, elapsed = _run_case(case['func'])
        outcomes.append({'passed': error is None, 'description': case['description'], 'error': error})
        if error is None:
            print(f"  {_paint('✔ pass', 'green')}  {PASS_FACE}  {case['description']} "
                  f"{_paint(f'({elapsed:.1f}ms)', 'grey')}")
        else:
            print(f"  {_paint('✖ fail', 'red')}  {FAIL_FACE}  {case['description']}")
            print("    " + _paint(f"└─> {error}", 'grey'))

    all_passed = _report(outcomes, (time.perf_counter() - started) * 1000)

    # several modules may register and run from one process
    _registry['cases'] = []
    return all_passed


def main(title: str) -> None:
    """entry point for `python <module>_test.py`: exit status 1 on any failure"""
    sys.exit(0 if run(title) else 1)


def _report(outcomes: List[Dict[str, Any]], duration_ms: float) -> bool:
    failed = sum(1 for o in outcomes if not o['passed'])
    colour = 'green' if failed == 0 else 'red'

    print("\n" + _paint("--- summary ---", colour))
    print(f"  {SUMMARY_FACE}  ran {_paint(len(outcomes), 'blue')} tests in {_paint(f'{duration_ms:.2f}ms', 'yellow')}")
    print(f"  {_paint(f'passed: {len(outcomes) - failed}', 'green')}, {_paint(f'failed: {failed}', 'red')}")
    print(_paint("---------------", colour) + "\n")
    return failed == 0
