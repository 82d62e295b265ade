from pydantic_core import ValidationError
from pydantic_settings import BaseSettings
from pytest import raises

from attrmap.container import AttributeMap
from attrmap.pydantic_settings import SettingsAttributeLoader


class ExampleSettings(BaseSettings, frozen=True):
    value: int = 5
    label: str = "example"
    optional: str | None = None


class RequiredSettings(BaseSettings):
    token_for_attrmap_tests: str


def test_load(attribute_map: AttributeMap[str], monkeypatch):
    monkeypatch.delenv("VALUE", raising=False)
    monkeypatch.delenv("LABEL", raising=False)
    monkeypatch.delenv("OPTIONAL", raising=False)

    settings = SettingsAttributeLoader().load(ExampleSettings, attribute_map)

    assert isinstance(settings, ExampleSettings)
    assert attribute_map.try_get_attribute("value", int) == 5
    assert attribute_map.try_get_attribute("label", str) == "example"
    assert not attribute_map.has_attribute("optional")


def test_load_from_env(attribute_map: AttributeMap[str], monkeypatch):
    monkeypatch.setenv("VALUE", "7")

    SettingsAttributeLoader().load(ExampleSettings, attribute_map)

    assert attribute_map["value"] == 7


def test_load_from_env_file(attribute_map: AttributeMap[str], monkeypatch, tmp_path):
    monkeypatch.delenv("VALUE", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("VALUE=11\n")

    SettingsAttributeLoader(env_file=env_file).load(
        ExampleSettings, attribute_map
    )

    assert attribute_map["value"] == 11


def test_load_overwrites(attribute_map: AttributeMap[str], monkeypatch):
    monkeypatch.delenv("VALUE", raising=False)
    attribute_map.add("value", 1)
    attribute_map.add("other", "kept")

    SettingsAttributeLoader().load(ExampleSettings, attribute_map)

    assert attribute_map["value"] == 5
    assert attribute_map["other"] == "kept"


def test_load_invalid(attribute_map: AttributeMap[str], monkeypatch):
    monkeypatch.delenv("TOKEN_FOR_ATTRMAP_TESTS", raising=False)
    loader = SettingsAttributeLoader()

    with raises(ValidationError):
        loader.load(RequiredSettings, attribute_map)

    assert loader.try_load(RequiredSettings, attribute_map) is None
    assert attribute_map.count() == 0


def test_load_instance(attribute_map: AttributeMap[str]):
    SettingsAttributeLoader.load_instance(
        ExampleSettings(value=3, optional="set"), attribute_map
    )

    assert attribute_map["value"] == 3
    assert attribute_map["optional"] == "set"
