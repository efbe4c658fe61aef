import pytest

from testsuites.ui_testing.framework.config_loader import ConfigLoader


@pytest.fixture(autouse=True)
def _fresh_config():
    # Tests rebind the singleton to temp files; never leak that binding
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
