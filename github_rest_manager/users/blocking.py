"""Users blocked by the authenticated user."""

from ..manager import GitHubManager
from ..models import ReturnFormat
from ..records import SimpleUser

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT

BLOCKS_PATH = "user/blocks"


class BlockingManager(GitHubManager):
    def list_blocked_users(self, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_get_request(BLOCKS_PATH, params), format, SimpleUser.list_from_json
        )

    def is_blocked(self, username: str) -> bool:
        return self.send_check_request(f"{BLOCKS_PATH}/{username}")

    def block_user(self, username: str) -> None:
        self.send_put_request(f"{BLOCKS_PATH}/{username}")

    def unblock_user(self, username: str) -> None:
        self.send_delete_request(f"{BLOCKS_PATH}/{username}")
