"""Shared pytest configuration for goldlex.

Hypothesis profiles (selected once per session):
    dev      500 examples, random seed; the local default
    ci       50 examples, derandomized, failure blobs printed; used when CI=true
    verbose  100 examples with per-example output

HYPOTHESIS_PROFILE=<name> overrides the automatic choice.

Tests marked ``fuzz`` throw adversarial text at the grammars and are skipped
in ordinary runs. Select them with ``pytest -m fuzz`` or by naming
tests/test_expression_fuzzing.py on the command line.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = (Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink)

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 500, "derandomize": False},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "derandomize": False, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, phases=_PHASES, **_options)  # type: ignore[arg-type]


def _selected_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_selected_profile())

_FUZZ_MODULE = "test_expression_fuzzing"


def _fuzz_requested(config: pytest.Config) -> bool:
    if "fuzz" in str(config.getoption("-m", default="")):
        return True
    return any(_FUZZ_MODULE in str(arg) for arg in config.invocation_params.args)


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless a fuzz run was asked for."""
    if _fuzz_requested(config):
        return

    skip = pytest.mark.skip(reason="fuzz test; run with: pytest -m fuzz")
    for item in items:
        if item.get_closest_marker("fuzz") is not None:
            item.add_marker(skip)
