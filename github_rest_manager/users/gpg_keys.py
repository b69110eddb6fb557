"""GPG keys of the authenticated user."""

from ..manager import GitHubManager
from ..models import ReturnFormat
from .records import GPGKey

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT

GPG_KEYS_PATH = "user/gpg_keys"


class GPGKeysManager(GitHubManager):
    def list_gpg_keys(self, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_get_request(GPG_KEYS_PATH, params), format, GPGKey.list_from_json
        )

    def create_gpg_key(
        self,
        armored_public_key: str,
        name: str | None = None,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        payload = {"armored_public_key": armored_public_key}
        if name is not None:
            payload["name"] = name
        return self._returner(
            self.send_post_request(GPG_KEYS_PATH, payload), format, GPGKey.from_json
        )

    def get_gpg_key(self, gpg_key_id: int, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_get_request(f"{GPG_KEYS_PATH}/{gpg_key_id}"), format, GPGKey.from_json
        )

    def delete_gpg_key(self, gpg_key_id: int) -> None:
        self.send_delete_request(f"{GPG_KEYS_PATH}/{gpg_key_id}")

    def list_user_gpg_keys(
        self, username: str, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT
    ):
        return self._returner(
            self.send_get_request(f"users/{username}/gpg_keys", params),
            format,
            GPGKey.list_from_json,
        )
