"""Codes of conduct known to GitHub."""

from ..manager import GitHubManager
from ..models import ReturnFormat
from .records import CodeOfConduct

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT


class CodesOfConductManager(GitHubManager):
    def list_codes_of_conduct(self, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_get_request("codes_of_conduct"), format, CodeOfConduct.list_from_json
        )

    def get_code_of_conduct(self, key: str, format: ReturnFormat = LIBRARY_OBJECT):
        return self._returner(
            self.send_get_request(f"codes_of_conduct/{key}"), format, CodeOfConduct.from_json
        )
