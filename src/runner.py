"""
runner.py
- TestCase: a label paired with a zero-argument action
- Runs cases strictly in declared order, timing each one
- A raised exception fails only its own case; the suite always runs to the end
"""

import inspect
import time
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, List, Optional, Sequence

FAILED_FALSY = "falsy"
FAILED_ERROR = "error"


@dataclass(frozen=True)
class TestCase:
    label: str
    action: Callable[[], Any]

    __test__ = False  # keep pytest from collecting this class


@dataclass(frozen=True)
class Result:
    label: str
    passed: bool
    duration_ms: float
    error: Optional[str] = None
    failure_kind: Optional[str] = None

    def __post_init__(self):
        if self.error is not None and self.passed:
            raise ValueError(f"result '{self.label}' cannot pass with an error")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def create_test(label: str, action: Callable[[], Any]) -> TestCase:
    """Define a test. `action` may be a coroutine function or a plain callable."""
    return TestCase(label, action)


def _error_message(exc: BaseException) -> str:
    return str(exc) or repr(exc)


async def execute_test(case: TestCase) -> Result:
    """Run one case to completion and return its Result."""
    start = time.perf_counter()
    try:
        value = case.action()
        if inspect.isawaitable(value):
            value = await value
    except Exception as exc:
        duration = (time.perf_counter() - start) * 1000
        return Result(case.label, False, duration, error=_error_message(exc), failure_kind=FAILED_ERROR)
    duration = (time.perf_counter() - start) * 1000
    passed = bool(value)
    return Result(case.label, passed, duration, failure_kind=None if passed else FAILED_FALSY)


async def collect_results(cases: Sequence[TestCase]) -> List[Result]:
    """Run every case sequentially (no fail-fast) and return one Result per case."""
    results: List[Result] = []
    for case in cases:
        results.append(await execute_test(case))
    return results


async def run_tests(cases: Sequence[TestCase], reporter: Optional[Callable[[List[Result]], Any]] = None) -> List[bool]:
    """
    Run the suite, hand the full Result list to `reporter` (the console table by
    default) and return the parallel list of pass flags.
    """
    if reporter is None:
        from .reporting import print_results
        reporter = print_results
    results = await collect_results(cases)
    reporter(results)
    return [r.passed for r in results]


def all_passed(flags: Sequence[bool]) -> bool:
    return all(flags)


def exit_code(flags: Sequence[bool]) -> int:
    return 0 if all_passed(flags) else 1
