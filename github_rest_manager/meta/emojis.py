"""Emojis available on GitHub."""

from ..manager import GitHubManager
from ..models import ReturnFormat
from ..records import ResponseParseError
from .records import Emoji

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT


def _emojis_from_json(body) -> list[Emoji]:
    # GitHub returns a single object mapping each emoji name to its image URL
    if not isinstance(body, dict):
        raise ResponseParseError(f"emojis: expected a JSON object, got {type(body).__name__}")
    return [Emoji.from_json({"name": name, "url": url}) for name, url in body.items()]


class EmojisManager(GitHubManager):
    def list_emojis(self, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(self.send_get_request("emojis"), format, _emojis_from_json)
