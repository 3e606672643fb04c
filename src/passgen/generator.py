import random
from dataclasses import dataclass, field
from logging import getLogger
from typing import MutableSequence

from . import charset
from .charset import CharacterClass
from .dto import GeneratorConfig
from .exc import ConfigurationError

__all__ = ("Generator", "generate", "shuffle")


logger = getLogger(__name__)


def shuffle(buffer: MutableSequence[str], rng: random.Random) -> None:
    """Permutes ``buffer`` in place (Fisher-Yates)."""
    for i in range(len(buffer) - 1, 0, -1):
        j = rng.randrange(i + 1)
        buffer[i], buffer[j] = buffer[j], buffer[i]


@dataclass(slots=True)
class Generator:
    """
    Produces passwords of exactly ``config.length`` characters drawn from the
    character classes enabled in ``config``.

    Every enabled class is represented at least once whenever the length allows
    it. The random source is not cryptographically secure unless a
    :class:`random.SystemRandom` is passed in.
    """

    rng: random.Random = field(default_factory=random.Random)

    def generate(self, config: GeneratorConfig) -> str:
        """
        Raises:
            ConfigurationError: If no character class is enabled.
        """
        if not (classes := config.enabled_classes()):
            raise ConfigurationError(
                "At least one character class must be selected.",
                ctx=ConfigurationError.Context(available=tuple(CharacterClass)),
            )

        buffer = [charset.sample(cls, self.rng) for cls in classes]

        while len(buffer) < config.length:
            cls = classes[self.rng.randrange(len(classes))]
            buffer.append(charset.sample(cls, self.rng))

        shuffle(buffer, self.rng)

        if len(buffer) > config.length:
            # more required classes than positions, keep a random subset
            logger.debug(
                "length %d is below the number of enabled classes (%d)",
                config.length,
                len(classes),
            )
            del buffer[config.length :]

        return "".join(buffer)


def generate(config: GeneratorConfig, rng: random.Random | None = None) -> str:
    return Generator(rng if rng is not None else random.Random()).generate(config)
