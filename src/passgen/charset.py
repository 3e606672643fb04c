import random
import string
from enum import StrEnum

__all__ = ("SYMBOLS", "CharacterClass", "ALPHABETS", "sample", "classify")


SYMBOLS = '~`!@#$%^&*()_-+={[}]|:;"<,>.?/'


class CharacterClass(StrEnum):
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"

    @property
    def alphabet(self) -> str:
        return ALPHABETS[self]


# Zero is never emitted for numbers.
ALPHABETS: dict[CharacterClass, str] = {
    CharacterClass.UPPERCASE: string.ascii_uppercase,
    CharacterClass.LOWERCASE: string.ascii_lowercase,
    CharacterClass.NUMBERS: "123456789",
    CharacterClass.SYMBOLS: SYMBOLS,
}


def sample(char_class: CharacterClass, rng: random.Random) -> str:
    """Returns a single character drawn uniformly from ``char_class``'s alphabet."""
    alphabet = ALPHABETS[char_class]
    return alphabet[rng.randrange(len(alphabet))]


def classify(char: str) -> CharacterClass | None:
    for char_class, alphabet in ALPHABETS.items():
        if char in alphabet:
            return char_class
    return None
