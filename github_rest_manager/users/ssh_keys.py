"""Git SSH keys of the authenticated user."""

from ..manager import GitHubManager
from ..models import ReturnFormat
from .records import PublicKey, SSHKey

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT

KEYS_PATH = "user/keys"


class SSHKeysManager(GitHubManager):
    def list_ssh_keys(self, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_get_request(KEYS_PATH, params), format, SSHKey.list_from_json
        )

    def create_ssh_key(self, key: str, title: str | None = None, format: ReturnFormat = LIBRARY_OBJECT):
        payload = {"key": key}
        if title is not None:
            payload["title"] = title
        return self._returner(self.send_post_request(KEYS_PATH, payload), format, SSHKey.from_json)

    def get_ssh_key(self, key_id: int, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_get_request(f"{KEYS_PATH}/{key_id}"), format, SSHKey.from_json
        )

    def delete_ssh_key(self, key_id: int) -> None:
        self.send_delete_request(f"{KEYS_PATH}/{key_id}")

    def list_user_ssh_keys(
        self, username: str, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT
    ):
        """List the public SSH keys of any user."""
        return self._returner(
            self.send_get_request(f"users/{username}/keys", params),
            format,
            PublicKey.list_from_json,
        )
