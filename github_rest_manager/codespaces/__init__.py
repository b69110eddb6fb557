from .machines import MachinesManager

__all__ = ["MachinesManager"]
