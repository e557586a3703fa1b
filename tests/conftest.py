import pytest

import cipher_engine


@pytest.fixture(autouse=True)
def restore_engine_state():
    """Plugins and the CLI mutate module globals; put them back after each test."""
    registry = dict(cipher_engine.CIPHER_REGISTRY)
    verbose = cipher_engine.VERBOSE
    yield
    cipher_engine.CIPHER_REGISTRY.clear()
    cipher_engine.CIPHER_REGISTRY.update(registry)
    cipher_engine.VERBOSE = verbose


@pytest.fixture
def plugin_dir(tmp_path):
    """Empty plugin directory; tests write their own manifest and plugin files."""
    directory = tmp_path / "plugins"
    directory.mkdir()
    return directory
