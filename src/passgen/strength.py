from enum import StrEnum

from .dto import GeneratorConfig

__all__ = ("StrengthLevel", "score")


class StrengthLevel(StrEnum):
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"

    @property
    def color(self) -> str:
        return _COLORS[self]


_COLORS = {
    StrengthLevel.WEAK: "red",
    StrengthLevel.MEDIUM: "yellow",
    StrengthLevel.STRONG: "green",
}

STRONG_MIN_LENGTH = 8
MEDIUM_MIN_LENGTH = 6


def score(config: GeneratorConfig) -> StrengthLevel:
    """
    Rates a configuration, not a password: two equal configs always get the same
    level no matter what was generated from them.
    """
    has_extra = config.include_numbers or config.include_symbols

    if (
        config.include_uppercase
        and config.include_lowercase
        and has_extra
        and config.length >= STRONG_MIN_LENGTH
    ):
        return StrengthLevel.STRONG
    if (
        (config.include_uppercase or config.include_lowercase)
        and has_extra
        and config.length >= MEDIUM_MIN_LENGTH
    ):
        return StrengthLevel.MEDIUM
    return StrengthLevel.WEAK
