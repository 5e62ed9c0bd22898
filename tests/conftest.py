"""Pytest configuration for the giftrecover test suite.

Hypothesis profiles:
- dev (default): 200 examples per property
- ci (CI=true): 50 derandomized examples, so failures reproduce between runs

HYPOTHESIS_PROFILE overrides the choice.

Tests marked @pytest.mark.fuzz (long recovery runs over arbitrary text)
are skipped unless selected with ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import HealthCheck, settings

# Recovery properties re-parse a chunk once per error; inputs stay small, so
# only the per-example deadline needs loosening for slow CI machines.
settings.register_profile("dev", max_examples=200)
settings.register_profile(
    "ci",
    max_examples=50,
    derandomize=True,
    deadline=None,
    print_blob=True,
    suppress_health_check=[HealthCheck.too_slow],
)


def _profile_name() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "fuzz: long-running recovery fuzz runs")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip_fuzz = pytest.mark.skip(reason="fuzz run; select with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
