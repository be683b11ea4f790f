"""The result of an assigner run."""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from .groups import Group
from .subjects import Subject


class Assignment:
    """Describes which subjects ended up in which groups.

    Assignments are obtained from an assigner and are read-only afterwards.
    """

    def __init__(
        self,
        subject_ids_to_group_ids: Optional[Dict[int, int]] = None,
        group_ids_to_subject_ids: Optional[Dict[int, List[int]]] = None,
    ):
        self._subject_ids_to_group_ids = dict(subject_ids_to_group_ids or {})
        self._group_ids_to_subject_ids = {
            group_id: list(subject_ids)
            for group_id, subject_ids in (group_ids_to_subject_ids or {}).items()
        }

    def subject_to_group_id(self, subject: Subject) -> Optional[int]:
        """Get the id of the group the given subject is assigned to."""
        return self._subject_ids_to_group_ids.get(subject.id())

    def group_to_subject_ids(self, group: Group) -> Optional[List[int]]:
        """Get the ids of the subjects assigned to the given group."""
        subject_ids = self._group_ids_to_subject_ids.get(group.id())
        return list(subject_ids) if subject_ids is not None else None

    def to_dicts(self) -> Tuple[Dict[int, int], Dict[int, List[int]]]:
        """Copy the assignment into a pair of plain mappings.

        Returns:
            Tuple of (subject id -> group id, group id -> subject ids)
        """
        return (
            dict(self._subject_ids_to_group_ids),
            {
                group_id: list(subject_ids)
                for group_id, subject_ids in self._group_ids_to_subject_ids.items()
            },
        )

    def total_dissatisfaction(self, subjects: Iterable[Subject]) -> int:
        """Sum how dissatisfied the given subjects are with their groups.

        Subjects without a group are not counted.
        """
        total = 0
        for subject in subjects:
            group_id = self._subject_ids_to_group_ids.get(subject.id())
            if group_id is not None:
                total += subject.dissatisfaction(group_id)
        return total

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the assignment.

        Returns:
            Dictionary with assignment statistics
        """
        group_sizes = {
            group_id: len(subject_ids)
            for group_id, subject_ids in self._group_ids_to_subject_ids.items()
        }
        average_size = sum(group_sizes.values()) / len(group_sizes) if group_sizes else 0.0

        return {
            'total_subjects': len(self._subject_ids_to_group_ids),
            'group_sizes': group_sizes,
            'average_group_size': round(average_size, 2),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Assignment):
            return NotImplemented
        return self.to_dicts() == other.to_dicts()

    def __repr__(self) -> str:
        return f"Assignment({self._group_ids_to_subject_ids})"
