import pytest

from infrastructure.services.providers import get_message_service, get_settings


@pytest.fixture(autouse=True)
def reset_providers():
    """Clear application-scoped singletons so tests never share settings or bundles."""
    get_settings.cache_clear()
    get_message_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_message_service.cache_clear()
