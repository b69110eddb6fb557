from .emojis import EmojisManager
from .markdown import MarkdownManager
from .meta import MetaManager
from .rate_limit import RateLimitManager

__all__ = ["EmojisManager", "MarkdownManager", "MetaManager", "RateLimitManager"]
