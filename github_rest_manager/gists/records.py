"""Records returned by the gists endpoints."""

from pydantic import field_validator

from ..records import GitHubRecord, SimpleUser


class GistFile(GitHubRecord):
    filename: str
    type: str | None = None
    language: str | None = None
    raw_url: str | None = None
    size: int = 0
    truncated: bool = False
    content: str | None = None


class Gist(GitHubRecord):
    """A gist. ``files`` holds one ``GistFile`` per file, in GitHub's order.

    File contents are only included when a single gist is fetched.
    """

    id: str
    url: str
    files: tuple[GistFile, ...]
    node_id: str | None = None
    forks_url: str | None = None
    commits_url: str | None = None
    git_pull_url: str | None = None
    git_push_url: str | None = None
    html_url: str | None = None
    public: bool = False
    created_at: str | None = None
    updated_at: str | None = None
    description: str | None = None
    comments: int = 0
    comments_url: str | None = None
    owner: SimpleUser | None = None
    truncated: bool = False

    @field_validator("files", mode="before")
    @classmethod
    def files_by_name(cls, value):
        # GitHub keys the files by name; each file carries its name too
        if isinstance(value, dict):
            return tuple(value.values())
        return value

    def get_file(self, filename: str) -> GistFile | None:
        return next((f for f in self.files if f.filename == filename), None)


class ChangeStatus(GitHubRecord):
    total: int = 0
    additions: int = 0
    deletions: int = 0


class GistCommit(GitHubRecord):
    url: str
    version: str
    committed_at: str
    change_status: ChangeStatus
    user: SimpleUser | None = None
