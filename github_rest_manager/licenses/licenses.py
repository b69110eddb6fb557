"""Open source licenses known to GitHub."""

from ..manager import GitHubManager
from ..models import ReturnFormat
from ..records import CommonLicense
from .records import License, RepositoryLicense

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT


class LicensesManager(GitHubManager):
    def list_common_licenses(
        self,
        featured: bool | None = None,
        params: dict | None = None,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        params = {**(params or {}), "featured": featured}
        return self._returner(
            self.send_get_request("licenses", params), format, CommonLicense.list_from_json
        )

    def get_license(self, license: str, format: ReturnFormat = LIBRARY_OBJECT):
        """Get a license by its key, e.g. "mit"."""
        return self._returner(
            self.send_get_request(f"licenses/{license}"), format, License.from_json
        )

    def get_repository_license(
        self, owner: str, repo: str, ref: str | None = None, format: ReturnFormat = LIBRARY_OBJECT
    ):
        return self._returner(
            self.send_get_request(f"repos/{owner}/{repo}/license", {"ref": ref}),
            format,
            RepositoryLicense.from_json,
        )
