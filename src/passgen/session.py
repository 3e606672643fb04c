import random
from dataclasses import dataclass, field
from logging import getLogger

from .charset import CharacterClass
from .clipboard import AbstractClipboard, copy_password
from .dto import GeneratorConfig
from .generator import Generator
from .strength import StrengthLevel, score

__all__ = ("Session",)


logger = getLogger(__name__)


@dataclass(slots=True)
class Session:
    """
    State held by a presentation layer between user interactions: the current
    configuration, the last generated password and the strength derived from them.
    """

    config: GeneratorConfig = field(default_factory=GeneratorConfig)
    generator: Generator = field(default_factory=Generator)
    password: str = ""

    @classmethod
    def from_rng(
        cls, rng: random.Random, config: GeneratorConfig | None = None
    ) -> "Session":
        return cls(config=config or GeneratorConfig(), generator=Generator(rng))

    @property
    def strength(self) -> StrengthLevel:
        return score(self.config)

    def set_length(self, length: int) -> None:
        """
        Raises:
            pydantic.ValidationError: If ``length`` is out of bounds.
        """
        self.config = self.config.with_length(length)

    def set_class(self, char_class: CharacterClass, enabled: bool) -> None:
        self.config = self.config.with_class(char_class, enabled)

    def generate(self) -> str:
        """
        Replaces the current password with a fresh one. On failure the previous
        password is kept.

        Raises:
            ConfigurationError: If no character class is enabled.
        """
        self.password = self.generator.generate(self.config)
        logger.debug(
            "generated %d-character password (strength: %s)",
            len(self.password),
            self.strength,
        )
        return self.password

    async def copy(self, clipboard: AbstractClipboard) -> None:
        """
        Raises:
            ClipboardError: If nothing was generated yet or the write fails.
        """
        await copy_password(clipboard, self.password)
