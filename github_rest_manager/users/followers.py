"""Followers and followed users."""

from ..manager import GitHubManager
from ..models import ReturnFormat
from ..records import SimpleUser

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT


class FollowersManager(GitHubManager):
    def list_followers(self, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT):
        """List the people following the authenticated user."""
        return self._returner(
            self.send_get_request("user/followers", params), format, SimpleUser.list_from_json
        )

    def list_following(self, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT):
        """List the people the authenticated user follows."""
        return self._returner(
            self.send_get_request("user/following", params), format, SimpleUser.list_from_json
        )

    def is_following(self, username: str) -> bool:
        return self.send_check_request(f"user/following/{username}")

    def follow_user(self, username: str) -> None:
        self.send_put_request(f"user/following/{username}")

    def unfollow_user(self, username: str) -> None:
        self.send_delete_request(f"user/following/{username}")

    def list_user_followers(
        self, username: str, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT
    ):
        return self._returner(
            self.send_get_request(f"users/{username}/followers", params),
            format,
            SimpleUser.list_from_json,
        )

    def list_user_following(
        self, username: str, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT
    ):
        return self._returner(
            self.send_get_request(f"users/{username}/following", params),
            format,
            SimpleUser.list_from_json,
        )

    def user_follows(self, username: str, target_user: str) -> bool:
        """Check whether ``username`` follows ``target_user``."""
        return self.send_check_request(f"users/{username}/following/{target_user}")
