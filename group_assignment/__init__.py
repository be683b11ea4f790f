"""Group Assignment - preference based assignment of subjects to capacity bounded groups."""

__version__ = "0.1.0"

from .assigners import FirstComeFirstServed, ProposeAndReject
from .assignment import Assignment
from .config import Config
from .errors import AssignmentError, CapacityError, TotalCapacityError
from .groups import DefaultGroup, Group
from .subjects import DefaultSubject, Subject

__all__ = [
    "Assignment",
    "AssignmentError",
    "CapacityError",
    "Config",
    "DefaultGroup",
    "DefaultSubject",
    "FirstComeFirstServed",
    "Group",
    "ProposeAndReject",
    "Subject",
    "TotalCapacityError",
]
