from .gists import GistsManager

__all__ = ["GistsManager"]
