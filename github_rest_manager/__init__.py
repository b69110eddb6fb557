"""Python bindings for GitHub's REST API.

One manager class per endpoint group; responses come back as immutable
records, decoded JSON or raw text depending on ``ReturnFormat``.
"""

from .activity import StarringManager, WatchingManager
from .cli import main
from .codespaces import MachinesManager
from .config import ConfigurationError, ManagerConfig, reset_stored_config
from .gists import GistsManager
from .licenses import CodesOfConductManager, LicensesManager
from .manager import GitHubManager, GitHubRequestError
from .meta import EmojisManager, MarkdownManager, MetaManager, RateLimitManager
from .models import ApiResponse, Directions, EmailVisibility, ReturnFormat, Visibility
from .records import GitHubRecord, ResponseParseError
from .users import (
    BlockingManager,
    EmailsManager,
    FollowersManager,
    GPGKeysManager,
    SocialAccountsManager,
    SSHKeysManager,
    SSHSigningKeysManager,
    UsersManager,
)

__all__ = [
    "main",
    "ApiResponse",
    "BlockingManager",
    "CodesOfConductManager",
    "ConfigurationError",
    "Directions",
    "EmailVisibility",
    "EmailsManager",
    "EmojisManager",
    "FollowersManager",
    "GPGKeysManager",
    "GistsManager",
    "GitHubManager",
    "GitHubRecord",
    "GitHubRequestError",
    "LicensesManager",
    "MachinesManager",
    "ManagerConfig",
    "MarkdownManager",
    "MetaManager",
    "RateLimitManager",
    "ResponseParseError",
    "ReturnFormat",
    "SSHKeysManager",
    "SSHSigningKeysManager",
    "SocialAccountsManager",
    "StarringManager",
    "UsersManager",
    "Visibility",
    "WatchingManager",
    "reset_stored_config",
]
