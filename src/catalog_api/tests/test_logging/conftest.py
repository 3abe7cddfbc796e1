import pytest

from catalog_api.config import get_settings
from catalog_api.core.logging.builder import setup_logging


@pytest.fixture
def restore_logging():
    """Re-install the session logging config after a test that replaced it."""
    yield
    setup_logging(get_settings())
