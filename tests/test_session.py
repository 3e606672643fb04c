import pydantic
import pytest
from passgen import (
    CharacterClass,
    ClipboardError,
    ConfigurationError,
    MemoryClipboard,
    Session,
    StrengthLevel,
)


@pytest.fixture
def session(rng) -> Session:
    return Session.from_rng(rng)


def test_initial_state(session):
    assert session.password == ""
    assert session.config.length == 10
    assert session.strength is StrengthLevel.WEAK


def test_strength_follows_config(session):
    session.set_class(CharacterClass.LOWERCASE, True)
    assert session.strength is StrengthLevel.WEAK

    session.set_class(CharacterClass.NUMBERS, True)
    assert session.strength is StrengthLevel.STRONG

    session.set_length(7)
    assert session.strength is StrengthLevel.MEDIUM

    session.set_class(CharacterClass.NUMBERS, False)
    assert session.strength is StrengthLevel.WEAK


def test_generate_replaces_password(session):
    first = session.generate()
    second = session.generate()

    assert session.password == second
    assert len(first) == len(second) == 10


def test_failed_generation_keeps_previous_password(session):
    previous = session.generate()
    session.set_class(CharacterClass.UPPERCASE, False)

    with pytest.raises(ConfigurationError):
        session.generate()

    assert session.password == previous


def test_set_length_rejects_out_of_range(session):
    with pytest.raises(pydantic.ValidationError):
        session.set_length(0)
    assert session.config.length == 10


@pytest.mark.asyncio
async def test_copy_writes_password(session):
    clipboard = MemoryClipboard()
    password = session.generate()

    await session.copy(clipboard)

    assert clipboard.content == password


@pytest.mark.asyncio
async def test_copy_before_generate_fails(session):
    clipboard = MemoryClipboard()

    with pytest.raises(ClipboardError, match="First generate a password"):
        await session.copy(clipboard)

    assert clipboard.content == ""
    assert session.password == ""
