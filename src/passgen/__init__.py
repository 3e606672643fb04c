from .charset import CharacterClass
from .clipboard import (
    AbstractClipboard,
    MemoryClipboard,
    SystemClipboard,
    copy_password,
)
from .dto import GeneratorConfig
from .exc import ApplicationError, ClipboardError, ConfigurationError
from .generator import Generator, generate
from .session import Session
from .strength import StrengthLevel, score

__all__ = (
    "AbstractClipboard",
    "ApplicationError",
    "CharacterClass",
    "ClipboardError",
    "ConfigurationError",
    "Generator",
    "GeneratorConfig",
    "MemoryClipboard",
    "Session",
    "StrengthLevel",
    "SystemClipboard",
    "copy_password",
    "generate",
    "score",
)
