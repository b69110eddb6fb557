from .blocking import BlockingManager
from .emails import EmailsManager
from .followers import FollowersManager
from .gpg_keys import GPGKeysManager
from .social_accounts import SocialAccountsManager
from .ssh_keys import SSHKeysManager
from .ssh_signing_keys import SSHSigningKeysManager
from .users import UsersManager

__all__ = [
    "BlockingManager",
    "EmailsManager",
    "FollowersManager",
    "GPGKeysManager",
    "SocialAccountsManager",
    "SSHKeysManager",
    "SSHSigningKeysManager",
    "UsersManager",
]
