"""Response container, return formats and shared constants."""

from dataclasses import dataclass
from enum import Enum

GITHUB_MEDIA_TYPE = "application/vnd.github+json"
GITHUB_API_VERSION = "2022-11-28"


@dataclass
class ApiResponse:
    """Response from a GitHub REST API call."""

    status: int
    body: dict | list | str
    text: str = ""
    etag: str | None = None
    link: str | None = None


class ReturnFormat(Enum):
    """How a manager method hands back the response.

    STRING returns the raw response text, JSON the decoded JSON value and
    LIBRARY_OBJECT the matching record (or list of records).
    """

    STRING = "string"
    JSON = "json"
    LIBRARY_OBJECT = "library_object"


class Directions(str, Enum):
    asc = "asc"
    desc = "desc"


class Visibility(str, Enum):
    all = "all"
    private = "private"
    selected = "selected"


class EmailVisibility(str, Enum):
    public = "public"
    private = "private"
