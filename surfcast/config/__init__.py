from .loader import load_config
from .schema import StormGlassConfig

__all__ = ["load_config", "StormGlassConfig"]
