"""Rate limit status of the access token."""

from ..manager import GitHubManager
from ..models import ReturnFormat
from .records import RateOverview

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT


class RateLimitManager(GitHubManager):
    def get_rate_limit(self, format: ReturnFormat = LIBRARY_OBJECT):
        """Get the remaining quota per API resource.

        Calling this endpoint does not count against the core rate limit.
        """
        return self._returner(self.send_get_request("rate_limit"), format, RateOverview.from_json)
