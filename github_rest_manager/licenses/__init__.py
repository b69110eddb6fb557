from .codes_of_conduct import CodesOfConductManager
from .licenses import LicensesManager

__all__ = ["CodesOfConductManager", "LicensesManager"]
