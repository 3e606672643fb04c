import pydantic
import pytest
from passgen._conf import Settings
from passgen.util.model import convert_errors, format_errors


def test_defaults():
    settings = Settings()
    config = settings.generator_config()

    assert config.length == 10
    assert config.include_uppercase is True
    assert settings.secure_random is False


def test_environment(monkeypatch):
    monkeypatch.setenv("PASSGEN_INCLUDE_SYMBOLS", "true")
    monkeypatch.setenv("PASSGEN_SECURE_RANDOM", "1")

    settings = Settings()

    assert settings.include_symbols is True
    assert settings.secure_random is True


def test_overrides_skip_none():
    config = Settings(length=12).generator_config(length=None, include_numbers=True)

    assert config.length == 12
    assert config.include_numbers is True


def test_validation_errors_are_readable():
    with pytest.raises(pydantic.ValidationError) as excinfo:
        Settings(length=0, verbose=True)

    message = format_errors(convert_errors(excinfo.value))

    assert "length: Input must be greater than or equal to 1" in message
    assert "verbose: Extra fields not allowed" in message
