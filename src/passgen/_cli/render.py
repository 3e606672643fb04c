from dataclasses import dataclass, field

from rich.console import Console, Group, RenderableType
from rich.text import Text

from ..strength import StrengthLevel

__all__ = ("PasswordRenderer",)


@dataclass(slots=True)
class PasswordRenderer:
    """Composes generated passwords and the strength indicator for the terminal."""

    passwords: list[str] = field(default_factory=list)
    strength: StrengthLevel | None = None

    def compose_renderable(self) -> RenderableType:
        items: list[RenderableType] = [Text(pw) for pw in self.passwords]
        if self.strength is not None:
            items.append(compose_strength(self.strength))
        return Group(*items)

    def render(self, console: Console | None = None) -> None:
        (console or Console(highlight=False)).print(self.compose_renderable())


def compose_strength(level: StrengthLevel) -> Text:
    text = Text("Strength: ")
    text.append(str(level), style="bold %s" % level.color)
    return text
