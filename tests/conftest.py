"""Pytest configuration and shared fixtures for the strtools test suite."""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "property: Property-based tests driven by Hypothesis")


@pytest.fixture
def clean_environ(monkeypatch) -> dict[str, str]:
    """Provide an environment mapping without any STRTOOLS_* variables."""
    for key in list(os.environ):
        if key.startswith("STRTOOLS_"):
            monkeypatch.delenv(key)
    return dict(os.environ)


@pytest.fixture
def restore_logging():
    """Restore root and library logger state after a test reconfigures logging."""
    root = logging.getLogger()
    library = logging.getLogger("strtools")
    saved = (root.level, list(root.handlers), library.level, list(library.handlers), library.propagate)
    try:
        yield
    finally:
        for logger in (root, library):
            for handler in logger.handlers:
                if handler not in saved[1] and handler not in saved[3]:
                    handler.close()
        root.setLevel(saved[0])
        root.handlers[:] = saved[1]
        library.setLevel(saved[2])
        library.handlers[:] = saved[3]
        library.propagate = saved[4]
