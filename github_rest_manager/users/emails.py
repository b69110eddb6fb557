"""Email addresses of the authenticated user."""

from ..manager import GitHubManager
from ..models import EmailVisibility, ReturnFormat
from .records import Email

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT

EMAILS_PATH = "user/emails"
PUBLIC_EMAILS_PATH = "user/public_emails"
EMAIL_VISIBILITY_PATH = "user/email/visibility"


class EmailsManager(GitHubManager):
    def list_email_addresses(self, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_get_request(EMAILS_PATH, params), format, Email.list_from_json
        )

    def list_public_email_addresses(
        self, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT
    ):
        return self._returner(
            self.send_get_request(PUBLIC_EMAILS_PATH, params), format, Email.list_from_json
        )

    def add_email_addresses(self, *emails: str, format: ReturnFormat = LIBRARY_OBJECT):
        """Add one or more addresses; returns the added addresses."""
        if not emails:
            raise ValueError("at least one email address is required")
        return self._returner(
            self.send_post_request(EMAILS_PATH, {"emails": list(emails)}),
            format,
            Email.list_from_json,
        )

    def delete_email_addresses(self, *emails: str) -> None:
        if not emails:
            raise ValueError("at least one email address is required")
        self.send_delete_request(EMAILS_PATH, {"emails": list(emails)})

    def set_primary_email_visibility(
        self, visibility: EmailVisibility | str, format: ReturnFormat = LIBRARY_OBJECT
    ):
        """Make the primary address public or private.

        Returns the addresses of the user with their new visibility.
        """
        return self._returner(
            self.send_patch_request(EMAIL_VISIBILITY_PATH, {"visibility": visibility}),
            format,
            Email.list_from_json,
        )
