"""Records returned by the users endpoints."""

from ..records import GitHubRecord, SimpleUser


class Plan(GitHubRecord):
    name: str
    space: int
    private_repos: int
    collaborators: int = 0


class User(SimpleUser):
    """A user with the profile fields of ``GET /users/{username}``.

    The private counters and the plan are only sent for the authenticated
    user.
    """

    company: str | None = None
    blog: str | None = None
    location: str | None = None
    hireable: bool | None = None
    bio: str | None = None
    twitter_username: str | None = None
    public_repos: int = 0
    public_gists: int = 0
    followers: int = 0
    following: int = 0
    created_at: str | None = None
    updated_at: str | None = None
    private_gists: int | None = None
    total_private_repos: int | None = None
    owned_private_repos: int | None = None
    disk_usage: int | None = None
    collaborators: int | None = None
    two_factor_authentication: bool | None = None
    plan: Plan | None = None
    suspended_at: str | None = None
    business_plus: bool | None = None
    ldap_dn: str | None = None


class ContextualInformation(GitHubRecord):
    message: str
    octicon: str


class Hovercard(GitHubRecord):
    contexts: tuple[ContextualInformation, ...]


class Email(GitHubRecord):
    email: str
    primary: bool
    verified: bool
    visibility: str | None = None


class PublicKey(GitHubRecord):
    """Key as listed publicly for a user: only its id and material."""

    id: int
    key: str


class SSHSigningKey(GitHubRecord):
    id: int
    key: str
    title: str | None = None
    created_at: str | None = None


class SSHKey(SSHSigningKey):
    url: str | None = None
    verified: bool | None = None
    read_only: bool | None = None


class GPGKeyEmail(GitHubRecord):
    email: str
    verified: bool


class GPGKey(GitHubRecord):
    id: int
    key_id: str
    public_key: str
    name: str | None = None
    primary_key_id: int | None = None
    emails: tuple[GPGKeyEmail, ...] = ()
    subkeys: tuple["GPGKey", ...] = ()
    can_sign: bool = False
    can_encrypt_comms: bool = False
    can_encrypt_storage: bool = False
    can_certify: bool = False
    created_at: str | None = None
    expires_at: str | None = None
    revoked: bool = False
    raw_key: str | None = None


class SocialAccount(GitHubRecord):
    provider: str
    url: str
