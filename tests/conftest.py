"""Pytest configuration for the combiparse test suite.

Most property tests pair a generated parser with generated input
(tests/strategies) and compare whole Outcomes, so one example is cheap and
the search space is small: a few hundred examples cover the combinations
well. The JSON differential tests generate nested documents and are the slow
part of a run.

Hypothesis profiles:
- dev: 300 examples per property (local runs)
- ci: 50 examples, derandomized so a failing law reproduces from the log,
      no deadline because JSON document sizes vary a lot on shared runners
- verbose: 100 examples with per-example output, for debugging a shrink

Profile selection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Fuzz-marked tests (wide-alphabet JSON acceptance checks) are skipped unless
requested with ``pytest -m fuzz``. The Atheris harnesses live in fuzz/.
"""

import os
import sys
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=300, phases=_PHASES)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    deadline=None,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# INTERPRETER STATE
# =============================================================================


@pytest.fixture(autouse=True)
def _recursion_limit_restored() -> Iterator[None]:
    """run() raises the recursion limit per call; it must always put it back."""
    before = sys.getrecursionlimit()
    yield
    assert sys.getrecursionlimit() == before


# =============================================================================
# FUZZ TEST SEPARATION
# =============================================================================


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with ``-m fuzz``."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzz test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
