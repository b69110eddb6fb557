"""Starring repositories."""

from ..manager import GitHubManager
from ..models import Directions, ReturnFormat
from ..records import Repository, SimpleUser
from .records import Stargazer, StarredRepository

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT

# Media type that adds the star creation time to the listed items
STAR_MEDIA_TYPE = "application/vnd.github.star+json"


class StarringManager(GitHubManager):
    """Stargazers of a repository and the repositories starred by users.

    The list methods take ``with_timestamps=True`` to also get when each
    star was given; the items are then ``Stargazer`` / ``StarredRepository``
    records instead of bare users and repositories.
    """

    def _star_list(self, endpoint, params, with_timestamps, format, plain, timed):
        headers = {"Accept": STAR_MEDIA_TYPE} if with_timestamps else None
        response = self._request("GET", endpoint, params=params, headers=headers)
        return self._returner(response, format, timed if with_timestamps else plain)

    def list_stargazers(
        self,
        owner: str,
        repo: str,
        params: dict | None = None,
        with_timestamps: bool = False,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        return self._star_list(
            f"repos/{owner}/{repo}/stargazers",
            params,
            with_timestamps,
            format,
            SimpleUser.list_from_json,
            Stargazer.list_from_json,
        )

    def list_starred_repositories(
        self,
        sort: str | None = None,
        direction: Directions | str | None = None,
        params: dict | None = None,
        with_timestamps: bool = False,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        """List the repositories starred by the authenticated user.

        ``sort`` is ``created`` (when starred) or ``updated`` (last push).
        """
        params = {**(params or {}), "sort": sort, "direction": direction}
        return self._star_list(
            "user/starred",
            params,
            with_timestamps,
            format,
            Repository.list_from_json,
            StarredRepository.list_from_json,
        )

    def list_user_starred_repositories(
        self,
        username: str,
        sort: str | None = None,
        direction: Directions | str | None = None,
        params: dict | None = None,
        with_timestamps: bool = False,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        params = {**(params or {}), "sort": sort, "direction": direction}
        return self._star_list(
            f"users/{username}/starred",
            params,
            with_timestamps,
            format,
            Repository.list_from_json,
            StarredRepository.list_from_json,
        )

    def is_starred(self, owner: str, repo: str) -> bool:
        return self.send_check_request(f"user/starred/{owner}/{repo}")

    def star_repository(self, owner: str, repo: str) -> None:
        self.send_put_request(f"user/starred/{owner}/{repo}")

    def unstar_repository(self, owner: str, repo: str) -> None:
        self.send_delete_request(f"user/starred/{owner}/{repo}")
