"""Assigners place subjects in groups.

Available assigners:

- ``FirstComeFirstServed``: the subjects get assigned to their most
  preferred available group in turn.
- ``ProposeAndReject``: first assigns every subject to their first choice
  regardless of capacity, then the overfull groups hand over subjects to
  the groups with room in a manner similar to the Gale-Shapley algorithm.
"""

from typing import Dict, Type

from .base import Assigner
from .first_come_first_served import FirstComeFirstServed
from .propose_and_reject import ProposeAndReject

ASSIGNERS: Dict[str, Type[Assigner]] = {
    FirstComeFirstServed.name: FirstComeFirstServed,
    ProposeAndReject.name: ProposeAndReject,
}


def get_assigner(name: str) -> Assigner:
    """Create the assigner registered under the given method name.

    Raises:
        ValueError: If no assigner is registered under that name
    """
    try:
        return ASSIGNERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown assigner '{name}'. Choose from: {sorted(ASSIGNERS)}"
        ) from None


__all__ = ["ASSIGNERS", "Assigner", "FirstComeFirstServed", "ProposeAndReject", "get_assigner"]
