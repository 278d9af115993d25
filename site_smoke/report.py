"""
Check results, run reports and the exit status they map to.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any, Iterable

EXECUTION_CHECK = "Test Execution"


@dataclass(frozen=True)
class CheckResult:
    name: str
    passed: bool
    details: str


@dataclass(frozen=True)
class Report:
    timestamp: str
    summary: str
    tests: tuple[CheckResult, ...]

    @property
    def passed_count(self) -> int:
        return count_passed(self.tests)

    @property
    def total(self) -> int:
        return len(self.tests)

    @property
    def succeeded(self) -> bool:
        return self.passed_count == self.total

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "summary": self.summary,
            "tests": [asdict(test) for test in self.tests],
        }


class RunStatus(Enum):
    SUCCESS = "success"
    FAILURE = "failure"

    @property
    def exit_code(self) -> int:
        return 0 if self is RunStatus.SUCCESS else 1

    @classmethod
    def from_report(cls, report: Report) -> RunStatus:
        return cls.SUCCESS if report.succeeded else cls.FAILURE


def status_icon(passed: bool) -> str:
    return "✅" if passed else "❌"


def count_passed(results: Iterable[CheckResult]) -> int:
    return sum(1 for result in results if result.passed)


def summarize(results: list[CheckResult] | tuple[CheckResult, ...]) -> str:
    return f"{count_passed(results)}/{len(results)} tests passed"


def execution_failure(exc: BaseException, name: str = EXECUTION_CHECK) -> CheckResult:
    return CheckResult(name=name, passed=False, details=str(exc) or exc.__class__.__name__)


def build_report(results: Iterable[CheckResult], now: datetime | None = None) -> Report:
    tests = tuple(results)
    seen: set[str] = set()
    for test in tests:
        if test.name in seen:
            raise ValueError(f"Duplicate check name in run: {test.name}")
        seen.add(test.name)
    stamp = (now or datetime.now(UTC)).isoformat()
    return Report(timestamp=stamp, summary=summarize(tests), tests=tests)


def print_summary(report: Report) -> None:
    print("\n" + "=" * 50)
    print(f"TEST SUMMARY: {report.summary}")
    print("=" * 50)
    for test in report.tests:
        print(f"{status_icon(test.passed)} {test.name}: {test.details}")


def write_report(report: Report, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report.to_dict(), indent=2), encoding="utf-8")
    return path


def write_blob(blob: str | bytes, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(blob, bytes):
        path.write_bytes(blob)
    else:
        path.write_text(blob, encoding="utf-8")
    return path
