"""Records returned by the licenses and codes of conduct endpoints."""

from pydantic import Field

from ..records import CommonLicense, GitHubRecord


class License(CommonLicense):
    description: str | None = None
    implementation: str | None = None
    permissions: tuple[str, ...] = ()
    conditions: tuple[str, ...] = ()
    limitations: tuple[str, ...] = ()
    body: str | None = None
    featured: bool = False


class ContentLinks(GitHubRecord):
    self_url: str | None = Field(default=None, alias="self")
    git: str | None = None
    html: str | None = None


class RepositoryLicense(GitHubRecord):
    """The license file of a repository, with its detected license."""

    name: str
    path: str
    sha: str
    size: int = 0
    url: str | None = None
    html_url: str | None = None
    git_url: str | None = None
    download_url: str | None = None
    type: str | None = None
    content: str | None = None
    encoding: str | None = None
    links: ContentLinks | None = Field(default=None, alias="_links")
    license: CommonLicense | None = None


class CodeOfConduct(GitHubRecord):
    key: str
    name: str
    url: str | None = None
    body: str | None = None
    html_url: str | None = None
