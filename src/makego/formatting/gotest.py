#
# src/makego/formatting/gotest.py
#
"""
Condenses `go test` output into a short report.

Per-test progress chatter and passing/skipped test lines are dropped.
Failure details and any other output keep their original order. Package
summary lines are moved to the end: passing packages first, then a count
of packages without tests, then failing packages.
"""
import re

import structlog

from makego.formatting.protocols import OutputFormatter
from makego.telemetry import StructLogger

log: StructLogger = structlog.get_logger("formatting.gotest")

_PROGRESS_RE = re.compile(r"^\s*=== (RUN|PAUSE|CONT|NAME)\b")
_QUIET_RESULT_RE = re.compile(r"^\s*--- (PASS|SKIP):")
_BARE_STATUS_RE = re.compile(r"^(PASS|FAIL)\s*$")
_OK_PACKAGE_RE = re.compile(r"^ok\s*\t\S+")
_FAIL_PACKAGE_RE = re.compile(r"^FAIL\t\S+")
_NO_TESTS_RE = re.compile(r"^\?\s*\t\S+\t\[no test files\]")
# Go 1.22+ reports untested packages as "\t<pkg>\t\tcoverage: 0.0% of statements".
_NO_TESTS_COVERAGE_RE = re.compile(r"^\t\S+\t+coverage: 0\.0% of statements\s*$")


class GoTestFormatter(OutputFormatter):
    """Readability pass over raw `go test` output."""

    def format(self, raw: str) -> str:
        details: list[str] = []
        passed: list[str] = []
        failed: list[str] = []
        no_tests = 0

        for line in raw.splitlines():
            if _PROGRESS_RE.match(line) or _QUIET_RESULT_RE.match(line):
                continue
            if _BARE_STATUS_RE.match(line):
                continue
            if _OK_PACKAGE_RE.match(line):
                passed.append(line)
            elif _FAIL_PACKAGE_RE.match(line):
                failed.append(line)
            elif _NO_TESTS_RE.match(line) or _NO_TESTS_COVERAGE_RE.match(line):
                no_tests += 1
            elif line.strip() or (details and details[-1].strip()):
                details.append(line)

        log.debug(
            "Formatted go test output",
            passed=len(passed),
            failed=len(failed),
            no_tests=no_tests,
        )

        sections: list[str] = []
        if details:
            sections.append("\n".join(details).strip("\n"))
        summary = list(passed)
        if no_tests:
            noun = "package" if no_tests == 1 else "packages"
            summary.append(f"?   \t{no_tests} {noun} with no test files")
        summary.extend(failed)
        if summary:
            sections.append("\n".join(summary))
        return "\n\n".join(sections)

# 🔼⚙️
