"""Fixtures describing the routeguard package for pytestarch rules."""

import os

import pytest
from pytestarch import (
    EvaluableArchitecture,
    LayeredArchitecture,
    get_evaluable_architecture,
)

SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "src"))


@pytest.fixture(scope="session")
def evaluable() -> EvaluableArchitecture:
    """Import graph of every module under src/routeguard."""
    return get_evaluable_architecture(SRC_DIR, os.path.join(SRC_DIR, "routeguard"))


@pytest.fixture(scope="session")
def layers() -> LayeredArchitecture:
    """Domain at the core, then guards, route attachment and adapters.

    Module names carry the 'src.' prefix because the graph is rooted at
    the src/ directory.
    """
    return (
        LayeredArchitecture()
        .layer("domain")
        .containing_modules(["src.routeguard.domain"])
        .layer("guards")
        .containing_modules(["src.routeguard.guards"])
        .layer("application")
        .containing_modules(["src.routeguard.application"])
        .layer("infrastructure")
        .containing_modules(["src.routeguard.infrastructure"])
    )
