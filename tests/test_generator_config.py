import pydantic
import pytest
from passgen import CharacterClass, GeneratorConfig


def test_defaults():
    config = GeneratorConfig()
    assert config.length == 10
    assert config.enabled_classes() == (CharacterClass.UPPERCASE,)


def test_camel_case_aliases():
    config = GeneratorConfig.model_validate(
        {"length": 8, "includeLowercase": True, "includeSymbols": True}
    )
    assert config.enabled_classes() == (
        CharacterClass.UPPERCASE,
        CharacterClass.LOWERCASE,
        CharacterClass.SYMBOLS,
    )


@pytest.mark.parametrize("length", [0, 21, -3])
def test_length_out_of_bounds(length):
    with pytest.raises(pydantic.ValidationError):
        GeneratorConfig(length=length)


def test_unknown_field_rejected():
    with pytest.raises(pydantic.ValidationError):
        GeneratorConfig.model_validate({"includeEmoji": True})


def test_frozen():
    config = GeneratorConfig()
    with pytest.raises(pydantic.ValidationError):
        config.length = 5


def test_no_class_enabled_is_representable():
    config = GeneratorConfig(include_uppercase=False)
    assert config.enabled_classes() == ()


def test_with_class_returns_new_config():
    config = GeneratorConfig()
    updated = config.with_class(CharacterClass.NUMBERS, True)

    assert updated is not config
    assert updated.include_numbers is True
    assert config.include_numbers is False


def test_with_length_validates():
    with pytest.raises(pydantic.ValidationError):
        GeneratorConfig().with_length(25)
