from dataclasses import dataclass
from typing import TypedDict

from typing_extensions import override

from .charset import CharacterClass

__all__ = (
    "ApplicationError",
    "ConfigurationError",
    "ClipboardError",
)


@dataclass(slots=True)
class ApplicationError(Exception):
    class Context(TypedDict): ...

    message: str
    ctx: Context | None = None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


@dataclass(slots=True)
class ConfigurationError(ApplicationError):
    """
    Raised when a password is requested but the configuration leaves nothing to
    draw characters from.
    """

    class Context(TypedDict):
        """
        Attributes:
            available: Character classes the caller could have enabled.
        """

        available: tuple[CharacterClass, ...]

    @override
    def format_message(self) -> str:
        if not self.ctx:
            return self.message
        return "%s Available classes: %s." % (
            self.message,
            ", ".join(str(cls) for cls in self.ctx["available"]),
        )


@dataclass(slots=True)
class ClipboardError(ApplicationError):
    """
    Raised when a password can't be placed on the clipboard.

    This error usually occurs when nothing has been generated yet, or when the
    platform has no clipboard mechanism available (e.g. a headless session without
    ``xclip``/``wl-copy``).
    """

    class Context(TypedDict):
        """
        Attributes:
            reason: What the platform reported, kept out of the message template.
        """

        reason: str
