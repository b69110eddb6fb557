"""Machine types available to codespaces."""

from ..manager import GitHubManager
from ..models import ReturnFormat
from .records import MachinesList

LIBRARY_OBJECT = ReturnFormat.LIBRARY_OBJECT


class MachinesManager(GitHubManager):
    def list_repository_machines(
        self,
        owner: str,
        repo: str,
        location: str | None = None,
        client_ip: str | None = None,
        ref: str | None = None,
        format: ReturnFormat = LIBRARY_OBJECT,
    ):
        """List the machine types a codespace of this repository can use.

        Args:
            location: region the codespace would run in, e.g. "WestUs2"
            client_ip: IP used to pick the closest region when no location is given
            ref: branch or commit whose prebuild availability is reported
        """
        params = {"location": location, "client_ip": client_ip, "ref": ref}
        return self._returner(
            self.send_get_request(f"repos/{owner}/{repo}/codespaces/machines", params),
            format,
            MachinesList.from_json,
        )

    def list_codespace_machines(self, codespace_name: str, format: ReturnFormat = LIBRARY_OBJECT):
        """List the machine types an existing codespace can move to."""
        return self._returner(
            self.send_get_request(f"user/codespaces/{codespace_name}/machines"),
            format,
            MachinesList.from_json,
        )
