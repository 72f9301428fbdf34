"""Global pytest fixtures for corrector service tests."""

from __future__ import annotations

import importlib
from types import ModuleType
from typing import Callable

import pytest


@pytest.fixture
def load_service() -> Callable[[], ModuleType]:
    """Return a loader that re-imports the service so settings re-read the environment."""

    def _load() -> ModuleType:
        import corrector_service.main as main

        return importlib.reload(main)

    return _load
