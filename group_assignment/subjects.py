"""Subjects: the entities that get placed in groups."""

from abc import ABC, abstractmethod
from typing import Dict, Optional


class Subject(ABC):
    """A subject to be placed in exactly one group."""

    @abstractmethod
    def id(self) -> int:
        """Id used to identify the subject."""

    @abstractmethod
    def dissatisfaction(self, group_id: int) -> int:
        """How displeased the subject is with being assigned to the given group.

        Lower is better; 0 marks a first choice.
        """


class DefaultSubject(Subject):
    """Subject backed by a mapping of group ids to dissatisfaction ratings."""

    def __init__(
        self,
        id: int,
        preferences: Dict[int, int],
        default_dissatisfaction: Optional[int] = None,
    ):
        """Initialize the subject.

        Args:
            id: Unique subject id
            preferences: Mapping of group id -> dissatisfaction rating
            default_dissatisfaction: Rating for groups missing from
                ``preferences``. Defaults to one more than the worst rating given.
        """
        self._id = id
        self.preferences = dict(preferences)
        if default_dissatisfaction is None:
            default_dissatisfaction = max(self.preferences.values(), default=-1) + 1
        self.default_dissatisfaction = default_dissatisfaction

    def id(self) -> int:
        return self._id

    def dissatisfaction(self, group_id: int) -> int:
        return self.preferences.get(group_id, self.default_dissatisfaction)

    def __repr__(self) -> str:
        return f"DefaultSubject(id={self._id}, preferences={self.preferences})"
