"""Records returned by the meta, emojis and rate limit endpoints."""

from pydantic import field_validator

from ..records import GitHubRecord


class APIRoot(GitHubRecord):
    """URL templates advertised by ``GET /``."""

    current_user_url: str | None = None
    current_user_authorizations_html_url: str | None = None
    authorizations_url: str | None = None
    code_search_url: str | None = None
    commit_search_url: str | None = None
    emails_url: str | None = None
    emojis_url: str | None = None
    events_url: str | None = None
    feeds_url: str | None = None
    followers_url: str | None = None
    following_url: str | None = None
    gists_url: str | None = None
    hub_url: str | None = None
    issue_search_url: str | None = None
    issues_url: str | None = None
    keys_url: str | None = None
    label_search_url: str | None = None
    notifications_url: str | None = None
    organization_url: str | None = None
    organization_repositories_url: str | None = None
    organization_teams_url: str | None = None
    public_gists_url: str | None = None
    rate_limit_url: str | None = None
    repository_url: str | None = None
    repository_search_url: str | None = None
    current_user_repositories_url: str | None = None
    starred_url: str | None = None
    starred_gists_url: str | None = None
    topic_search_url: str | None = None
    user_url: str | None = None
    user_organizations_url: str | None = None
    user_repositories_url: str | None = None
    user_search_url: str | None = None


class SSHKeyFingerprint(GitHubRecord):
    algorithm: str
    fingerprint: str


class MetaInformation(GitHubRecord):
    """GitHub's published SSH fingerprints and IP ranges."""

    verifiable_password_authentication: bool
    ssh_key_fingerprints: tuple[SSHKeyFingerprint, ...] = ()
    ssh_keys: tuple[str, ...] = ()
    hooks: tuple[str, ...] = ()
    web: tuple[str, ...] = ()
    api: tuple[str, ...] = ()
    git: tuple[str, ...] = ()
    packages: tuple[str, ...] = ()
    pages: tuple[str, ...] = ()
    importer: tuple[str, ...] = ()
    actions: tuple[str, ...] = ()
    dependabot: tuple[str, ...] = ()

    @field_validator("ssh_key_fingerprints", mode="before")
    @classmethod
    def fingerprints_by_algorithm(cls, value):
        if isinstance(value, dict):
            return tuple(
                {"algorithm": algorithm, "fingerprint": fingerprint}
                for algorithm, fingerprint in value.items()
            )
        return value


class Emoji(GitHubRecord):
    name: str
    url: str


class Rate(GitHubRecord):
    limit: int
    remaining: int
    reset: int
    used: int
    resource: str | None = None


class RateLimitResources(GitHubRecord):
    core: Rate
    search: Rate
    graphql: Rate | None = None
    code_search: Rate | None = None
    source_import: Rate | None = None
    integration_manifest: Rate | None = None
    code_scanning_upload: Rate | None = None
    actions_runner_registration: Rate | None = None
    scim: Rate | None = None
    dependency_snapshots: Rate | None = None
    audit_log: Rate | None = None


class RateOverview(GitHubRecord):
    resources: RateLimitResources
    rate: Rate
