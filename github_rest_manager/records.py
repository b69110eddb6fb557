"""Base record type and the records shared across endpoint families.

Records are frozen pydantic models validated in strict mode: a missing
required key or a value of the wrong type raises ``ResponseParseError``.
Unknown keys are ignored. JSON arrays become tuples so that records stay
hashable.
"""

import functools

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator


class ResponseParseError(ValueError):
    """A JSON response did not match the record it was parsed into."""


def _describe(name: str, error: ValidationError) -> str:
    first = error.errors()[0]
    where = ".".join(str(part) for part in (name, *first["loc"]))
    return f"{where}: {first['msg']}"


@functools.cache
def _list_adapter(cls) -> TypeAdapter:
    return TypeAdapter(list[cls])


class GitHubRecord(BaseModel):
    """Base class of every response record."""

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def arrays_as_tuples(cls, value):
        if isinstance(value, list):
            return tuple(value)
        return value

    @classmethod
    def from_json(cls, data: dict):
        """Build the record from a decoded JSON object."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ResponseParseError(_describe(cls.__name__, e)) from e

    @classmethod
    def list_from_json(cls, data: list) -> list:
        """Build one record per item of a decoded JSON array."""
        try:
            return _list_adapter(cls).validate_python(data)
        except ValidationError as e:
            raise ResponseParseError(_describe(f"list[{cls.__name__}]", e)) from e


class GitHubList(GitHubRecord):
    """Envelope of the list endpoints that report a ``total_count``."""

    total_count: int = 0


class SimpleUser(GitHubRecord):
    login: str
    id: int
    node_id: str | None = None
    avatar_url: str | None = None
    gravatar_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    followers_url: str | None = None
    following_url: str | None = None
    gists_url: str | None = None
    starred_url: str | None = None
    subscriptions_url: str | None = None
    organizations_url: str | None = None
    repos_url: str | None = None
    events_url: str | None = None
    received_events_url: str | None = None
    type: str | None = None
    site_admin: bool = False
    name: str | None = None
    email: str | None = None


class CommonLicense(GitHubRecord):
    key: str
    name: str
    spdx_id: str | None = None
    url: str | None = None
    node_id: str | None = None
    html_url: str | None = None


class Repository(GitHubRecord):
    id: int
    name: str
    full_name: str
    node_id: str | None = None
    owner: SimpleUser | None = None
    private: bool = False
    html_url: str | None = None
    description: str | None = None
    fork: bool = False
    url: str | None = None
    homepage: str | None = None
    language: str | None = None
    forks_count: int = 0
    stargazers_count: int = 0
    watchers_count: int = 0
    open_issues_count: int = 0
    size: int = 0
    default_branch: str | None = None
    topics: tuple[str, ...] = ()
    archived: bool = False
    disabled: bool = False
    visibility: str | None = None
    license: CommonLicense | None = None
    pushed_at: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class Subscription(GitHubRecord):
    subscribed: bool
    ignored: bool
    reason: str | None = None
    created_at: str | None = None
    url: str | None = None
