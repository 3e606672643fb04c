from .generate import generate
from .strength import strength

__all__ = ("generate", "strength")
