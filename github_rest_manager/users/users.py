"""Profiles of the authenticated user and of any other user."""

from ..manager import GitHubManager
from ..models import ReturnFormat
from ..records import SimpleUser
from .records import Hovercard, User

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT

USER_PATH = "user"
USERS_PATH = "users"


class UsersManager(GitHubManager):
    def get_authenticated_user(self, format: ReturnFormat = LIBRARY_OBJECT):
        """Get the profile of the user owning the access token."""
        return self._returner(self.send_get_request(USER_PATH), format, User.from_json)

    def update_authenticated_user(
        self,
        name: str | None = None,
        email: str | None = None,
        blog: str | None = None,
        twitter_username: str | None = None,
        company: str | None = None,
        location: str | None = None,
        hireable: bool | None = None,
        bio: str | None = None,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        """Update the authenticated user's profile.

        Only the fields that are passed are sent; the others stay unchanged.
        """
        payload = {
            "name": name,
            "email": email,
            "blog": blog,
            "twitter_username": twitter_username,
            "company": company,
            "location": location,
            "hireable": hireable,
            "bio": bio,
        }
        payload = {key: value for key, value in payload.items() if value is not None}
        return self._returner(self.send_patch_request(USER_PATH, payload), format, User.from_json)

    def list_users(
        self,
        since: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        """List every user in sign-up order, starting after the user id ``since``."""
        params = {"since": since, "per_page": per_page}
        return self._returner(
            self.send_get_request(USERS_PATH, params), format, SimpleUser.list_from_json
        )

    def get_user(self, username: str, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_get_request(f"{USERS_PATH}/{username}"), format, User.from_json
        )

    def get_user_hovercard(
        self,
        username: str,
        subject_type: str | None = None,
        subject_id: str | int | None = None,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        """Get the hovercard of a user, optionally in the context of a subject.

        ``subject_type`` is one of organization, repository, issue or
        pull_request and requires ``subject_id``.
        """
        if subject_type is not None and subject_id is None:
            raise ValueError("subject_id is required with subject_type")
        params = {"subject_type": subject_type, "subject_id": subject_id}
        return self._returner(
            self.send_get_request(f"{USERS_PATH}/{username}/hovercard", params),
            format,
            Hovercard.from_json,
        )
