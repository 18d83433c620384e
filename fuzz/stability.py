#!/usr/bin/env python3
"""Stability Fuzzer (Atheris).

Feeds random text to the JSON grammar and detects unexpected exceptions.
Parsers report non-matches as ParseFailedError through run_or_fail(); a
ValueError is allowed for integers past the interpreter digit limit. Any
other exception is a finding. Inputs that json.loads() accepts must parse to
the same value, and inputs it rejects must be rejected. Inputs nested
MAX_NESTING_DEPTH or more brackets deep are outside the grammar's default
limit and only checked for crashes.

Usage:
    python fuzz/stability.py -max_total_time=60
"""

from __future__ import annotations

import atexit
import json
import logging
import math
import sys

# Crash-proof reporting: ensure summary is always emitted
_fuzz_stats: dict[str, int | str] = {"status": "incomplete", "iterations": 0, "findings": 0}


def _emit_final_report() -> None:
    """Emit JSON summary on exit (crash-proof reporting)."""
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)


atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    print("-" * 80, file=sys.stderr)
    print("ERROR: 'atheris' not found.", file=sys.stderr)
    print("Install the fuzz extra: pip install -e .[fuzz]", file=sys.stderr)
    print("On macOS, install LLVM first: brew install llvm", file=sys.stderr)
    print("-" * 80, file=sys.stderr)
    sys.exit(1)

# Suppress parser logging during fuzzing
logging.getLogger("combiparse").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["combiparse"]):
    from combiparse.constants import MAX_NESTING_DEPTH
    from combiparse.diagnostics import ParseFailedError
    from combiparse.grammars import parse_json


class UnexpectedCrash(Exception):  # noqa: N818 - Domain-specific name
    """Raised when an unexpected exception is detected."""


def _contains_non_finite(value: object) -> bool:
    match value:
        case float():
            return not math.isfinite(value)
        case list():
            return any(_contains_non_finite(v) for v in value)
        case dict():
            return any(_contains_non_finite(v) for v in value.values())
        case _:
            return False


def _bracket_depth(source: str) -> int:
    """Deepest [ / { nesting outside string literals."""
    depth = deepest = 0
    in_string = escaped = False
    for ch in source:
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch in "[{":
            depth += 1
            deepest = max(deepest, depth)
        elif ch in "]}":
            depth -= 1
    return deepest


def _report(kind: str, detail: str, source: str) -> None:
    _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
    _fuzz_stats["status"] = "finding"

    print()
    print("=" * 80)
    print(f"[FINDING] {kind}")
    print("=" * 80)
    print(detail)
    print(f"Input: {source[:200]!r}")
    print()
    print("Next steps:")
    print("  1. Reproduce: python fuzz/stability.py <crash file>")
    print("  2. Create unit test in tests/ with crash input as literal")
    print("  3. Fix the bug, run tests to confirm")
    print("=" * 80)


def TestOneInput(data: bytes) -> None:  # noqa: N802 - Atheris required name
    """Atheris entry point: parse fuzzed input and compare with json.loads."""
    global _fuzz_stats  # noqa: PLW0602 - Required for crash-proof reporting

    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)
    source = fdp.ConsumeUnicodeNoSurrogates(len(data))

    try:
        expected = json.loads(source)
        accepted = True
    except (ValueError, RecursionError):
        expected = None
        accepted = False

    try:
        actual = parse_json(source)
    except ParseFailedError:
        # json.loads also accepts NaN and Infinity, which are not JSON, and
        # nesting past the default depth limit.
        too_deep = _bracket_depth(source) >= MAX_NESTING_DEPTH
        if accepted and not too_deep and not _contains_non_finite(expected):
            _report("REJECTED VALID JSON", "parse_json() failed", source)
            msg = f"parse_json rejected input accepted by json.loads: {source[:80]!r}"
            raise UnexpectedCrash(msg) from None
        return
    except ValueError:
        return
    except Exception as e:
        _report("STABILITY BREACH DETECTED", f"Exception: {type(e).__name__}: {e}", source)
        msg = f"{type(e).__name__}: {e}"
        raise UnexpectedCrash(msg) from e

    if not accepted or actual != expected:
        _report("DECODER MISMATCH", f"parse_json: {actual!r}\njson.loads: {expected!r}", source)
        msg = f"parse_json disagrees with json.loads on {source[:80]!r}"
        raise UnexpectedCrash(msg)


def main() -> None:
    """Run the stability fuzzer."""
    print()
    print("=" * 80)
    print("Stability Fuzzer")
    print("=" * 80)
    print("Target: JSON grammar crash detection and decoder agreement")
    print("Contract: only ParseFailedError for invalid input")
    print("Press Ctrl+C to stop.")
    print("=" * 80)
    print()

    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
