from typing import Annotated

import annotated_types
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..charset import CharacterClass

MIN_LENGTH = 1
MAX_LENGTH = 20

Length = Annotated[
    int, annotated_types.Ge(MIN_LENGTH), annotated_types.Le(MAX_LENGTH)
]


class GeneratorConfig(BaseModel):
    """
    Character-class selection and target length for a single generation request.

    A config with every class disabled is valid to build and to score; it only
    becomes an error once a password is requested from it.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    length: Length = Field(default=10)
    include_uppercase: bool = True
    include_lowercase: bool = False
    include_numbers: bool = False
    include_symbols: bool = False

    def includes(self, char_class: CharacterClass) -> bool:
        match char_class:
            case CharacterClass.UPPERCASE:
                return self.include_uppercase
            case CharacterClass.LOWERCASE:
                return self.include_lowercase
            case CharacterClass.NUMBERS:
                return self.include_numbers
            case CharacterClass.SYMBOLS:
                return self.include_symbols

    def enabled_classes(self) -> tuple[CharacterClass, ...]:
        return tuple(cls for cls in CharacterClass if self.includes(cls))

    def with_class(self, char_class: CharacterClass, enabled: bool) -> "GeneratorConfig":
        return self.model_validate(
            {**self.model_dump(), "include_%s" % char_class.value: enabled}
        )

    def with_length(self, length: int) -> "GeneratorConfig":
        return self.model_validate({**self.model_dump(), "length": length})
