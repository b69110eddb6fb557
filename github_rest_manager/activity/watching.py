"""Watching repositories."""

from ..manager import GitHubManager
from ..models import ReturnFormat
from ..records import Repository, SimpleUser
from .records import RepositorySubscription

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT


class WatchingManager(GitHubManager):
    def list_watchers(
        self, owner: str, repo: str, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT
    ):
        return self._returner(
            self.send_get_request(f"repos/{owner}/{repo}/subscribers", params),
            format,
            SimpleUser.list_from_json,
        )

    def get_repository_subscription(self, owner: str, repo: str, format: ReturnFormat = LIBRARY_OBJECT):
        """Get the authenticated user's subscription to a repository.

        GitHub answers 404 when the user is not subscribed; that surfaces as
        ``httpx.HTTPStatusError`` like any other error.
        """
        return self._returner(
            self.send_get_request(f"repos/{owner}/{repo}/subscription"),
            format,
            RepositorySubscription.from_json,
        )

    def set_repository_subscription(
        self,
        owner: str,
        repo: str,
        subscribed: bool | None = None,
        ignored: bool | None = None,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        """Watch a repository, or ignore its notifications with ``ignored=True``."""
        payload = {"subscribed": subscribed, "ignored": ignored}
        payload = {key: value for key, value in payload.items() if value is not None}
        return self._returner(
            self.send_put_request(f"repos/{owner}/{repo}/subscription", payload),
            format,
            RepositorySubscription.from_json,
        )

    def delete_repository_subscription(self, owner: str, repo: str) -> None:
        self.send_delete_request(f"repos/{owner}/{repo}/subscription")

    def list_watched_repositories(self, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_get_request("user/subscriptions", params), format, Repository.list_from_json
        )

    def list_user_watched_repositories(
        self, username: str, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT
    ):
        return self._returner(
            self.send_get_request(f"users/{username}/subscriptions", params),
            format,
            Repository.list_from_json,
        )
