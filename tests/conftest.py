"""
Shared pytest fixtures and configuration for Tweaks tests.

Every test runs against fresh global state: a throwaway default backend,
no cached configuration and no default registry.
"""

import sys
from pathlib import Path

import pytest

# Put `src/` first so `import tweaks` uses workspace code.
_REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_REPO_ROOT / "src"))
# Put repo root early so `import tests.*` resolves locally.
sys.path.insert(1, str(_REPO_ROOT))

from tests.helpers import RecordingBackend  # noqa: E402
from tweaks.core.registry import TweakRegistry, set_registry  # noqa: E402
from tweaks.core.stores import MemoryBackend, set_default_backend  # noqa: E402
from tweaks.core.utils.config import set_config  # noqa: E402
from tweaks.core.utils.logger import reset_logging  # noqa: E402


# ============================================================================
# Global state isolation
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_state(tmp_path, monkeypatch):
    """Fresh config, registry and default backend for every test."""
    for name in (
        "TWEAKS_NAMESPACE",
        "TWEAKS_LOG_LEVEL",
        "TWEAKS_LOG_FILE",
        "TWEAKS_LOG_OVERRIDES",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TWEAKS_STORE_PATH", str(tmp_path / "overrides.json"))
    backend = MemoryBackend()
    set_config(None)
    set_registry(None)
    set_default_backend(backend)
    yield backend
    set_config(None)
    set_registry(None)
    set_default_backend(None)
    reset_logging()


# ============================================================================
# Registry and backend fixtures
# ============================================================================

@pytest.fixture
def registry() -> TweakRegistry:
    return TweakRegistry()


@pytest.fixture
def default_backend(isolated_state) -> MemoryBackend:
    """The MemoryBackend installed as the default for id-keyed tweaks."""
    return isolated_state


@pytest.fixture
def recording_backend() -> RecordingBackend:
    return RecordingBackend()


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual functions/classes")
    config.addinivalue_line("markers", "integration: Tests spanning registry, stores and backends")
