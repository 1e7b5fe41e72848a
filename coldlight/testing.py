"""A small registry of self-registering unit tests run at start-up."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import ClassVar, Iterator


class AutomaticTestFramework:
    """Holds test cases by name and runs them in name order."""

    _instance: ClassVar[AutomaticTestFramework | None] = None

    def __init__(self) -> None:
        self._cases: dict[str, UnitTest] = {}

    @classmethod
    def get(cls) -> AutomaticTestFramework:
        """Return the shared framework, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_test_case(self, name: str, test_case: UnitTest) -> None:
        """Add a case; a name already registered keeps its first case."""
        self._cases.setdefault(name, test_case)

    def __contains__(self, name: object) -> bool:
        return name in self._cases

    def __len__(self) -> int:
        return len(self._cases)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._cases))

    def run_all_tests(self) -> dict[str, bool]:
        """Run every case, report each result and return them by name."""
        results: dict[str, bool] = {}
        for name in sorted(self._cases):
            case = self._cases[name]
            passed = bool(case.run_test())
            results[name] = passed
            if passed:
                print(f"{case.name} Passed.", file=sys.stdout)
            else:
                print(f"{case.name} Failed.", file=sys.stderr)
        return results


class UnitTest(ABC):
    """A test case that registers itself with a framework when created."""

    def __init__(self, name: str, framework: AutomaticTestFramework | None = None) -> None:
        self.name = name
        if framework is None:
            framework = AutomaticTestFramework.get()
        framework.register_test_case(name, self)

    @abstractmethod
    def run_test(self) -> bool:
        """Run the check and return whether it passed."""