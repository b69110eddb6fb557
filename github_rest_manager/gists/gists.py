"""Gists: listing, editing, forking and starring."""

from ..manager import GitHubManager
from ..models import ReturnFormat
from .records import Gist, GistCommit

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT

GISTS_PATH = "gists"


def _files_payload(files: dict) -> dict:
    # A None content removes the file from the gist
    return {
        name: None if content is None else {"content": content}
        for name, content in files.items()
    }


class GistsManager(GitHubManager):
    def list_gists(
        self,
        since: str | None = None,
        params: dict | None = None,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        """List the authenticated user's gists, or public gists when anonymous.

        ``since`` is an ISO 8601 timestamp; only gists updated after it are
        returned.
        """
        params = {**(params or {}), "since": since}
        return self._returner(self.send_get_request(GISTS_PATH, params), format, Gist.list_from_json)

    def list_public_gists(
        self,
        since: str | None = None,
        params: dict | None = None,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        params = {**(params or {}), "since": since}
        return self._returner(
            self.send_get_request(f"{GISTS_PATH}/public", params), format, Gist.list_from_json
        )

    def list_starred_gists(
        self,
        since: str | None = None,
        params: dict | None = None,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        params = {**(params or {}), "since": since}
        return self._returner(
            self.send_get_request(f"{GISTS_PATH}/starred", params), format, Gist.list_from_json
        )

    def list_user_gists(
        self,
        username: str,
        since: str | None = None,
        params: dict | None = None,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        params = {**(params or {}), "since": since}
        return self._returner(
            self.send_get_request(f"users/{username}/gists", params), format, Gist.list_from_json
        )

    def create_gist(
        self,
        files: dict[str, str],
        description: str | None = None,
        public: bool | None = None,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        """Create a gist from a mapping of file name to content."""
        if not files:
            raise ValueError("a gist needs at least one file")
        payload = {"files": _files_payload(files)}
        if description is not None:
            payload["description"] = description
        if public is not None:
            payload["public"] = public
        return self._returner(self.send_post_request(GISTS_PATH, payload), format, Gist.from_json)

    def get_gist(self, gist_id: str, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_get_request(f"{GISTS_PATH}/{gist_id}"), format, Gist.from_json
        )

    def get_gist_revision(self, gist_id: str, sha: str, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_get_request(f"{GISTS_PATH}/{gist_id}/{sha}"), format, Gist.from_json
        )

    def update_gist(
        self,
        gist_id: str,
        files: dict[str, str | None] | None = None,
        description: str | None = None,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        """Change the description and/or files of a gist.

        Files mapped to None are deleted, the others are created or replaced.
        """
        payload = {}
        if files is not None:
            payload["files"] = _files_payload(files)
        if description is not None:
            payload["description"] = description
        if not payload:
            raise ValueError("nothing to update: pass files and/or description")
        return self._returner(
            self.send_patch_request(f"{GISTS_PATH}/{gist_id}", payload), format, Gist.from_json
        )

    def delete_gist(self, gist_id: str) -> None:
        self.send_delete_request(f"{GISTS_PATH}/{gist_id}")

    def list_gist_commits(
        self, gist_id: str, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT
    ):
        return self._returner(
            self.send_get_request(f"{GISTS_PATH}/{gist_id}/commits", params),
            format,
            GistCommit.list_from_json,
        )

    def list_gist_forks(
        self, gist_id: str, params: dict | None = None, format: ReturnFormat = LIBRARY_OBJECT
    ):
        return self._returner(
            self.send_get_request(f"{GISTS_PATH}/{gist_id}/forks", params),
            format,
            Gist.list_from_json,
        )

    def fork_gist(self, gist_id: str, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_post_request(f"{GISTS_PATH}/{gist_id}/forks"), format, Gist.from_json
        )

    def is_gist_starred(self, gist_id: str) -> bool:
        return self.send_check_request(f"{GISTS_PATH}/{gist_id}/star")

    def star_gist(self, gist_id: str) -> None:
        self.send_put_request(f"{GISTS_PATH}/{gist_id}/star")

    def unstar_gist(self, gist_id: str) -> None:
        self.send_delete_request(f"{GISTS_PATH}/{gist_id}/star")
