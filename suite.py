import sys
import time
from typing import List, Dict, Any, Callable, Optional, Type

# registered cases, in definition order
_cases: List[Dict[str, Any]] = []

_PALETTE = {
    'pass': '\033[92m',
    'fail': '\033[91m',
    'time': '\033[93m',
    'title': '\033[94m',
    'detail': '\033[90m',
    'end': '\033[0m',
}


def _paint(kind: str, text: Any) -> str:
    return f"{_PALETTE[kind]}{text}{_PALETTE['end']}"


class CaseAssertionError(AssertionError):
    """an assertion made by a test case, as opposed to an unexpected error."""


def test(description: str) -> Callable:
    """register the decorated function as a case; the function itself is returned unchanged."""

    def register(func: Callable) -> Callable:
        _cases.append({'func': func, 'description': description})
        return func

    return register


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise CaseAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable, *args,
                  message: Optional[str] = None, **kwargs) -> BaseException:
    """call func and require it to raise error_type; returns the raised error."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    except Exception as e:
        raise CaseAssertionError(
            message or f"expected {error_type.__name__}, got {type(e).__name__}: {e}") from e
    raise CaseAssertionError(message or f"expected {error_type.__name__}, nothing was raised")


def _outcome(case: Dict[str, Any]) -> Optional[str]:
    """none when the case passes, otherwise a one-line reason"""
    try:
        case['func']()
    except CaseAssertionError as e:
        return f"assertion failed: {e}"
    except Exception as e:
        return f"{type(e).__name__}: {e}"
    return None


def run(title: str = "test run") -> int:
    """run every registered case, print a report and return the number of failures."""
    print(_paint('title', f"\n== {title} =="))
    started = time.perf_counter()
    failures = 0

    for case in _cases:
        reason = _outcome(case)
        if reason is None:
            print(f"  {_paint('pass', 'ok  ')} {case['description']}")
        else:
            failures += 1
            print(f"  {_paint('fail', 'FAIL')} {case['description']}")
            print(f"       {_paint('detail', reason)}")

    elapsed = (time.perf_counter() - started) * 1000
    total = len(_cases)
    verdict = _paint('pass' if failures == 0 else 'fail', f"{total - failures}/{total} passed")
    print(f"\n  {verdict} in {_paint('time', f'{elapsed:.1f}ms')}\n")

    # several modules may run in one process
    _cases.clear()
    return failures


def main(title: str) -> None:
    """entry point for test modules run as scripts."""
    sys.exit(1 if run(title) else 0)
