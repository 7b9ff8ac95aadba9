import pytest

from ads_lib.core.config import AdsLibConfiguration, load_config
from ads_lib.core.constants import DEFAULT_APPLICATION_NAME, LIBRARY_NAME
from ads_lib.core.exceptions import ConfigurationError
from shared.utils.env import get_env_bool, parse_bool


def _write(tmp_path, text):
    path = tmp_path / "ads.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults():
    config = AdsLibConfiguration()

    assert config.application_name == DEFAULT_APPLICATION_NAME
    assert config.include_utilities_in_user_agent is True
    assert config.library_name == LIBRARY_NAME


def test_from_yaml(tmp_path):
    path = _write(
        tmp_path,
        "ads_lib:\n"
        "  application_name: YamlApp\n"
        "  include_utilities_in_user_agent: false\n",
    )

    config = AdsLibConfiguration.from_yaml(path)

    assert config.application_name == "YamlApp"
    assert config.include_utilities_in_user_agent is False


def test_from_yaml_without_section_uses_defaults(tmp_path):
    config = AdsLibConfiguration.from_yaml(_write(tmp_path, "other: 1\n"))

    assert config == AdsLibConfiguration()


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        AdsLibConfiguration.from_yaml(tmp_path / "missing.yml")


def test_from_yaml_invalid_yaml(tmp_path):
    with pytest.raises(ConfigurationError, match="Failed to parse"):
        AdsLibConfiguration.from_yaml(_write(tmp_path, "ads_lib: [unclosed\n"))


def test_from_yaml_section_must_be_mapping(tmp_path):
    with pytest.raises(ConfigurationError):
        AdsLibConfiguration.from_yaml(_write(tmp_path, "ads_lib: 3\n"))


def test_invalid_boolean_rejected():
    with pytest.raises(ConfigurationError, match="include_utilities_in_user_agent"):
        AdsLibConfiguration.from_dict({"include_utilities_in_user_agent": "maybe"})


def test_from_dict_ignores_unknown_keys():
    config = AdsLibConfiguration.from_dict({"application_name": "App", "unknown": 1})

    assert config.application_name == "App"


def test_from_env(monkeypatch):
    monkeypatch.setenv("ADS_LIB_APPLICATION_NAME", "EnvApp")
    monkeypatch.setenv("ADS_LIB_INCLUDE_UTILITIES_IN_USER_AGENT", "off")

    config = AdsLibConfiguration.from_env()

    assert config.application_name == "EnvApp"
    assert config.include_utilities_in_user_agent is False


def test_load_config_precedence(tmp_path, monkeypatch):
    path = _write(
        tmp_path,
        "ads_lib:\n"
        "  application_name: YamlApp\n"
        "  include_utilities_in_user_agent: false\n",
    )
    monkeypatch.setenv("ADS_LIB_CONFIG_PATH", str(path))

    assert load_config(use_dotenv=False).application_name == "YamlApp"

    monkeypatch.setenv("ADS_LIB_APPLICATION_NAME", "EnvApp")
    monkeypatch.setenv("ADS_LIB_INCLUDE_UTILITIES_IN_USER_AGENT", "yes")
    config = load_config(use_dotenv=False)
    assert config.application_name == "EnvApp"
    assert config.include_utilities_in_user_agent is True

    config = load_config(
        use_dotenv=False,
        application_name="ArgApp",
        include_utilities_in_user_agent=False,
    )
    assert config.application_name == "ArgApp"
    assert config.include_utilities_in_user_agent is False


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), (" ON ", True), ("1", True), ("no", False), ("0", False), ("x", None)],
)
def test_parse_bool(raw, expected):
    assert parse_bool(raw) is expected


def test_get_env_bool_default(monkeypatch):
    monkeypatch.setenv("ADS_LIB_TEST_FLAG", "garbage")

    assert get_env_bool("ADS_LIB_TEST_FLAG", default=True) is True
    assert get_env_bool("ADS_LIB_UNSET_FLAG") is False
