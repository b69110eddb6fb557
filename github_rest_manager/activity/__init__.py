from .starring import StarringManager
from .watching import WatchingManager

__all__ = ["StarringManager", "WatchingManager"]
