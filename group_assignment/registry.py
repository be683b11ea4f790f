"""Per-group membership bookkeeping used by the assigners."""

from typing import Dict, Iterable, List, Optional, Sequence

from .assignment import Assignment
from .errors import CapacityError
from .groups import Group
from .subjects import Subject


class GroupRegistry:
    """Wraps a group together with the subjects currently registered to it.

    The group and the subjects are the caller's objects; the registry only
    holds references to them.
    """

    def __init__(self, group: Group, subjects: Optional[Iterable[Subject]] = None):
        self.group = group
        self.subjects: List[Subject] = list(subjects) if subjects else []

    def id(self) -> int:
        return self.group.id()

    def capacity(self) -> int:
        return self.group.capacity()

    def full(self) -> bool:
        """Whether the group has reached its capacity."""
        return len(self.subjects) >= self.capacity()

    def overfull(self) -> bool:
        """Whether more subjects are registered than the group can hold."""
        return len(self.subjects) > self.capacity()

    def register_subject(self, subject: Subject) -> None:
        """Append a subject to the group.

        Raises:
            CapacityError: If the group is already full
        """
        if self.full():
            raise CapacityError(self.id())
        self.subjects.append(subject)

    def subjects_ids_to_group_id(self) -> Dict[int, int]:
        """Many to one mapping from the registered subjects' ids to the group id."""
        group_id = self.id()
        return {subject.id(): group_id for subject in self.subjects}

    def group_id_to_subject_ids(self) -> Dict[int, List[int]]:
        """One to many mapping from the group id to the registered subjects' ids."""
        return {self.id(): [subject.id() for subject in self.subjects]}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(group={self.id()}, capacity={self.capacity()}, "
            f"subjects={[subject.id() for subject in self.subjects]})"
        )


def assign_from_group_registries(registries: Sequence) -> Assignment:
    """Fold group registries into an assignment.

    Registries never share subjects, so the union of their mappings loses
    nothing.

    Args:
        registries: Registries exposing ``subjects_ids_to_group_id`` and
            ``group_id_to_subject_ids``

    Returns:
        Assignment describing the registries' current state
    """
    subject_ids_to_group_ids: Dict[int, int] = {}
    group_ids_to_subject_ids: Dict[int, List[int]] = {}

    for registry in registries:
        subject_ids_to_group_ids.update(registry.subjects_ids_to_group_id())
        group_ids_to_subject_ids.update(registry.group_id_to_subject_ids())

    return Assignment(subject_ids_to_group_ids, group_ids_to_subject_ids)


def best_available_registry(subject: Subject, registries: Sequence):
    """Find the non-full registry the subject minds the least.

    Ties go to the registry appearing first.

    Returns:
        The registry, or None if every registry is full
    """
    available = [registry for registry in registries if not registry.full()]
    if not available:
        return None
    return min(available, key=lambda registry: subject.dissatisfaction(registry.id()))


def most_desired_registry(subject: Subject, registries: Sequence):
    """Find the registry the subject minds the least, full or not.

    Ties go to the registry appearing first.
    """
    return min(registries, key=lambda registry: subject.dissatisfaction(registry.id()))
