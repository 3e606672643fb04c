from .generator_config import MAX_LENGTH, MIN_LENGTH, GeneratorConfig

__all__ = (
    "GeneratorConfig",
    "MIN_LENGTH",
    "MAX_LENGTH",
)
