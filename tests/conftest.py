import pytest

from ads_lib.core.config import AdsLibConfiguration
from ads_lib.useragent.utilities_provider import AdsUtilitiesUserAgentProvider
from ads_lib.utils.registry import AdsUtilityRegistry


@pytest.fixture
def registry():
    return AdsUtilityRegistry()


@pytest.fixture
def configuration():
    return AdsLibConfiguration(application_name="TestApp")


@pytest.fixture
def provider(registry, configuration):
    """Utilities provider; asserts the registry is empty once the test ends."""
    yield AdsUtilitiesUserAgentProvider(lambda: registry, configuration)
    assert registry.get_registered_utilities() == frozenset(), (
        "User agent provider should clear utilities"
    )


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in (
        "ADS_LIB_APPLICATION_NAME",
        "ADS_LIB_INCLUDE_UTILITIES_IN_USER_AGENT",
        "ADS_LIB_CONFIG_PATH",
        "ADS_LIB_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
