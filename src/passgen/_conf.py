from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .dto import GeneratorConfig
from .dto.generator_config import Length


class Settings(BaseSettings):
    """
    Defaults for every generation request. Values come from the environment
    (``PASSGEN_LENGTH``, ``PASSGEN_INCLUDE_SYMBOLS``, ...) first, then from the
    configuration file.
    """

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="PASSGEN_",
    )

    length: Length = 10
    include_uppercase: bool = True
    include_lowercase: bool = False
    include_numbers: bool = False
    include_symbols: bool = False
    secure_random: bool = False

    def generator_config(self, **overrides: int | bool | None) -> GeneratorConfig:
        """Builds a config from these defaults, ignoring overrides set to None."""
        return GeneratorConfig.model_validate(
            {
                **self.model_dump(exclude={"secure_random"}),
                **{k: v for k, v in overrides.items() if v is not None},
            }
        )

    @classmethod
    def settings_customise_sources(
        cls,
        _: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings
