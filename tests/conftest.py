"""Global pytest configuration for enumkit tests."""
import pytest

from enumkit.core import config as config_module
from enumkit.core.registry import _clear_registry


@pytest.fixture(autouse=True)
def isolated_registry():
    """Start and finish every test with an empty registry and default config."""
    _clear_registry()
    config_module.set_current_config(config_module.get_default_config())
    yield
    _clear_registry()
    config_module.set_current_config(config_module.get_default_config())
