"""The assigner interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..assignment import Assignment
from ..groups import Group
from ..subjects import Subject
from ..validators import validate_total_capacity


class Assigner(ABC):
    """Assigns subjects to groups."""

    name: str = ""

    @abstractmethod
    def assign(self, subjects: Sequence[Subject], groups: Sequence[Group]) -> Assignment:
        """Assign the given subjects to the given groups.

        Args:
            subjects: Subjects to assign, in priority order
            groups: Groups to assign them to, in tie-breaking order

        Returns:
            The resulting assignment

        Raises:
            TotalCapacityError: If the combined capacity is less than the number of subjects
        """

    @staticmethod
    def sufficient_capacity(subjects: Sequence[Subject], groups: Sequence[Group]) -> None:
        """Must be called by ``assign`` before any work is done; errors propagate."""
        validate_total_capacity(subjects, groups)
