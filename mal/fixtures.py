"""Loader and runner for line-pair `.mal` test fixtures.

Format:
    ;; comment lines and blank lines are skipped
    (1 2 3)          <- input line
    ;=>(1 2 3)       <- expected output
    (1 2             <- input line
    ;/unbalanced     <- anything not starting with ;=> means "must fail"
    ;>>> deferrable  <- stops collection
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .errors import ReaderError
from .repl import rep

COMMENT_PREFIX = ";;"
EXPECT_PREFIX = ";=>"
STOP_PREFIX = ";>>> deferrable"


@dataclass(frozen=True)
class FixtureCase:
    line: int
    input: str
    expected: str
    should_fail: bool
    source: str = "<string>"


@dataclass
class FixtureReport:
    passed: list[FixtureCase] = field(default_factory=list)
    failed: list[tuple[FixtureCase, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def load_fixtures(text: str, source: str = "<string>") -> list[FixtureCase]:
    lines = text.splitlines()
    cases: list[FixtureCase] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if line.startswith(COMMENT_PREFIX) or not line.strip():
            i += 1
            continue
        if line.startswith(STOP_PREFIX):
            break

        expectation = lines[i + 1] if i + 1 < len(lines) else ""
        if expectation.startswith(EXPECT_PREFIX):
            case = FixtureCase(i + 1, line, expectation[len(EXPECT_PREFIX):], False, source)
        else:
            case = FixtureCase(i + 1, line, "", True, source)
        cases.append(case)
        i += 2
    return cases


def load_fixture_file(path: Path | str) -> list[FixtureCase]:
    path = Path(path)
    return load_fixtures(path.read_text(encoding="utf-8"), str(path))


def run_case(case: FixtureCase) -> str | None:
    """Run one case, returning a failure description or None on success."""
    try:
        output = rep(case.input)
    except ReaderError as e:
        if case.should_fail:
            return None
        return f"expected {case.expected!r}, got error: {e}"
    if case.should_fail:
        return f"expected an error, got {output!r}"
    if output != case.expected:
        return f"expected {case.expected!r} != {output!r} actual"
    return None


def run_fixtures(cases: Iterable[FixtureCase]) -> FixtureReport:
    report = FixtureReport()
    for case in cases:
        failure = run_case(case)
        if failure is None:
            logging.info(f"{case.source}:{case.line} - PASSED: {case.input!r}")
            report.passed.append(case)
        else:
            logging.error(f"{case.source}:{case.line} - FAILED: {failure}")
            report.failed.append((case, failure))
    return report
