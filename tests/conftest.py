"""Global pytest configuration.

Conditionally registers optional fixture plugin `tests.algorithms.sample_graphs`.
Avoid importing the plugin directly to let pytest apply assertion rewriting.
When running a subset of tests where that module is unavailable, pytest still
collects and runs tests in the targeted folder.
"""

from __future__ import annotations

from importlib.util import find_spec

import pytest

from spath.config import SOLVER_CONFIG

# Register plugin if available without importing it here. Pytest will import it
# with assertion rewriting enabled, avoiding PytestAssertRewriteWarning.
pytest_plugins: list[str] = []
if find_spec("tests.algorithms.sample_graphs") is not None:
    pytest_plugins = ["tests.algorithms.sample_graphs"]


@pytest.fixture(autouse=True)
def _restore_solver_config():
    """Undo changes tests make to the global solver configuration."""
    saved = (
        SOLVER_CONFIG.check_non_negative_weights,
        SOLVER_CONFIG.max_reconstruction_steps_factor,
    )
    yield
    (
        SOLVER_CONFIG.check_non_negative_weights,
        SOLVER_CONFIG.max_reconstruction_steps_factor,
    ) = saved
