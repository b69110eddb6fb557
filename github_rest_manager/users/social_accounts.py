"""Social accounts linked to a profile."""

from ..manager import GitHubManager
from ..models import ReturnFormat
from .records import SocialAccount

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT

SOCIAL_ACCOUNTS_PATH = "user/social_accounts"


class SocialAccountsManager(GitHubManager):
    def list_social_accounts(self, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_get_request(SOCIAL_ACCOUNTS_PATH, params),
            format,
            SocialAccount.list_from_json,
        )

    def add_social_accounts(self, *account_urls: str, format: ReturnFormat = LIBRARY_OBJECT):
        if not account_urls:
            raise ValueError("at least one account URL is required")
        return self._returner(
            self.send_post_request(SOCIAL_ACCOUNTS_PATH, {"account_urls": list(account_urls)}),
            format,
            SocialAccount.list_from_json,
        )

    def delete_social_accounts(self, *account_urls: str) -> None:
        if not account_urls:
            raise ValueError("at least one account URL is required")
        self.send_delete_request(SOCIAL_ACCOUNTS_PATH, {"account_urls": list(account_urls)})

    def list_user_social_accounts(
        self, username: str, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT
    ):
        return self._returner(
            self.send_get_request(f"users/{username}/social_accounts", params),
            format,
            SocialAccount.list_from_json,
        )
