"""
Package shim for the PokeAPI client and its live test harness.
Exposes the client, the runner and the reporter so tests can import from `src`.
"""
from .poke_client import FetchError, PokeClient
from .runner import Result, TestCase, all_passed, collect_results, create_test, execute_test, exit_code, run_tests
from .reporting import format_summary, print_results

__all__ = [
    "FetchError",
    "PokeClient",
    "Result",
    "TestCase",
    "all_passed",
    "collect_results",
    "create_test",
    "execute_test",
    "exit_code",
    "run_tests",
    "format_summary",
    "print_results",
]
