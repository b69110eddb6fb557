"""Records returned by the codespaces machines endpoints."""

from ..records import GitHubList, GitHubRecord


class Machine(GitHubRecord):
    name: str
    display_name: str
    operating_system: str
    storage_in_bytes: int
    memory_in_bytes: int
    cpus: int
    prebuild_availability: str | None = None


class MachinesList(GitHubList):
    machines: tuple[Machine, ...] = ()
