#!/usr/bin/env python3
"""Cursor Integrity Fuzzer (Atheris).

Targets: combiparse.syntax.cursor.Cursor
Tests position tracking, prefix matching and line/column computation.
"""

from __future__ import annotations

import atexit
import json
import logging
import sys

# --- PEP 695 Type Aliases ---
type FuzzStats = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}

def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)

atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    sys.exit(1)

logging.getLogger("combiparse").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["combiparse"]):
    from combiparse.syntax.cursor import Cursor


def _reference_line_col(source: str, pos: int) -> tuple[int, int]:
    before = source[:pos]
    line = before.count("\n") + 1
    column = pos - (before.rfind("\n") + 1) + 1
    return line, column


def _finding(message: str) -> None:
    _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
    raise RuntimeError(message)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: Test Cursor navigation invariants."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)

    try:
        source = fdp.ConsumeUnicodeNoSurrogates(1024)
        cursor = Cursor(source, 0)

        ops = fdp.ConsumeIntInRange(1, 20)
        for _ in range(ops):
            if cursor.is_eof:
                break

            # Suffix invariant
            if cursor.rest != source[cursor.pos :]:
                _finding(f"rest mismatch at pos {cursor.pos}")

            # Anchored prefix match
            length = fdp.ConsumeIntInRange(0, 8)
            prefix = source[cursor.pos : cursor.pos + length]
            if not cursor.startswith(prefix):
                _finding(f"startswith({prefix!r}) false at pos {cursor.pos}")

            # Line/column agrees with a direct count
            expected = _reference_line_col(source, cursor.pos)
            if cursor.compute_line_col() != expected:
                _finding(
                    f"Position mismatch at pos {cursor.pos}: "
                    f"{cursor.compute_line_col()} != {expected}"
                )

            step = fdp.ConsumeIntInRange(1, 10)
            moved = cursor.advance(step)
            if moved.pos != min(cursor.pos + step, len(source)):
                _finding(f"advance({step}) from {cursor.pos} landed at {moved.pos}")
            cursor = moved

        offset = fdp.ConsumeIntInRange(0, 2000)
        _ = cursor.peek(offset)

    except (ValueError, EOFError):
        pass
    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise

if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
