"""API root, service metadata and the small text endpoints."""

from pydantic import StrictStr, TypeAdapter, ValidationError

from ..manager import GitHubManager
from ..models import ReturnFormat
from ..records import ResponseParseError
from .records import APIRoot, MetaInformation

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT

_VERSIONS = TypeAdapter(list[StrictStr])


def _versions_from_json(body) -> list[str]:
    try:
        return _VERSIONS.validate_python(body)
    except ValidationError as e:
        raise ResponseParseError(f"versions: expected a JSON array of strings, got {body!r}") from e


class MetaManager(GitHubManager):
    def get_api_root(self, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(self.send_get_request(""), format, APIRoot.from_json)

    def get_meta_information(self, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(self.send_get_request("meta"), format, MetaInformation.from_json)

    def get_octocat(self, text: str | None = None) -> str:
        """Get the octocat as ASCII art, saying ``text`` in its speech bubble."""
        return self.send_get_request("octocat", {"s": text}).text

    def get_api_versions(self, format: ReturnFormat = LIBRARY_OBJECT):
        """List the supported REST API versions (dates, e.g. "2022-11-28")."""
        return self._returner(self.send_get_request("versions"), format, _versions_from_json)

    def get_zen(self) -> str:
        return self.send_get_request("zen").text
