import abc
import asyncio
from dataclasses import dataclass
from logging import getLogger

import pyperclip
from typing_extensions import override

from .exc import ClipboardError

__all__ = (
    "AbstractClipboard",
    "SystemClipboard",
    "MemoryClipboard",
    "copy_password",
)


logger = getLogger(__name__)


class AbstractClipboard(abc.ABC):
    @abc.abstractmethod
    async def write_text(self, text: str) -> None:
        """
        Raises:
            ClipboardError: If the platform refuses the write.
        """


@dataclass(slots=True)
class SystemClipboard(AbstractClipboard):
    """Writes to the desktop clipboard through :mod:`pyperclip`."""

    @override
    async def write_text(self, text: str) -> None:
        try:
            # pyperclip shells out to pbcopy/xclip/wl-copy, keep it off the loop
            await asyncio.to_thread(pyperclip.copy, text)
        except pyperclip.PyperclipException as ex:
            raise ClipboardError(
                "Failed to copy password: {ctx[reason]}",
                ctx=ClipboardError.Context(reason=str(ex)),
            ) from ex


@dataclass(slots=True)
class MemoryClipboard(AbstractClipboard):
    content: str = ""

    @override
    async def write_text(self, text: str) -> None:
        self.content = text


async def copy_password(clipboard: AbstractClipboard, password: str) -> None:
    """
    Places ``password`` on ``clipboard``. There is no retry: a failure is reported to
    the caller once and nothing else changes.

    Raises:
        ClipboardError: If ``password`` is empty or the clipboard write fails.
    """
    if not password:
        raise ClipboardError("First generate a password to copy.")

    await clipboard.write_text(password)
    logger.debug("copied password to %s", type(clipboard).__name__)
