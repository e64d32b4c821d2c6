import pytest
import structlog

from balance_checker.config import install_default_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
    install_default_logging()
