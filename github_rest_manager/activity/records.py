"""Records returned by the starring and watching endpoints."""

from ..records import GitHubRecord, Repository, SimpleUser, Subscription


class Stargazer(GitHubRecord):
    """A stargazer together with when the star was given."""

    starred_at: str
    user: SimpleUser


class StarredRepository(GitHubRecord):
    starred_at: str
    repo: Repository


class RepositorySubscription(Subscription):
    repository_url: str | None = None
