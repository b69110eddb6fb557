"""SSH keys used to sign commits."""

from ..manager import GitHubManager
from ..models import ReturnFormat
from .records import SSHSigningKey

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT

SIGNING_KEYS_PATH = "user/ssh_signing_keys"


class SSHSigningKeysManager(GitHubManager):
    def list_ssh_signing_keys(self, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_get_request(SIGNING_KEYS_PATH, params), format, SSHSigningKey.list_from_json
        )

    def create_ssh_signing_key(
        self, key: str, title: str | None = None, format: ReturnFormat = LIBRARY_OBJECT
    ):
        payload = {"key": key}
        if title is not None:
            payload["title"] = title
        return self._returner(
            self.send_post_request(SIGNING_KEYS_PATH, payload), format, SSHSigningKey.from_json
        )

    def get_ssh_signing_key(self, ssh_signing_key_id: int, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_get_request(f"{SIGNING_KEYS_PATH}/{ssh_signing_key_id}"),
            format,
            SSHSigningKey.from_json,
        )

    def delete_ssh_signing_key(self, ssh_signing_key_id: int) -> None:
        self.send_delete_request(f"{SIGNING_KEYS_PATH}/{ssh_signing_key_id}")

    def list_user_ssh_signing_keys(
        self, username: str, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT
    ):
        return self._returner(
            self.send_get_request(f"users/{username}/ssh_signing_keys", params),
            format,
            SSHSigningKey.list_from_json,
        )
