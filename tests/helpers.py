"""Simple subject type used across the tests."""

from typing import List

from group_assignment.subjects import Subject


class RankedSubject(Subject):
    """Subject whose dissatisfaction is the group's position in its preference list.

    Groups missing from the list rate the length of the list.
    """

    def __init__(self, id: int, preferences: List[int]):
        self._id = id
        self.preferences = preferences

    def id(self) -> int:
        return self._id

    def dissatisfaction(self, group_id: int) -> int:
        if group_id in self.preferences:
            return self.preferences.index(group_id)
        return len(self.preferences)

    def __repr__(self) -> str:
        return f"RankedSubject({self._id}, {self.preferences})"


class IndifferentSubject(Subject):
    """Subject rating every group 1, so it has no first choice."""

    def __init__(self, id: int):
        self._id = id

    def id(self) -> int:
        return self._id

    def dissatisfaction(self, group_id: int) -> int:
        return 1


class ZeroSubject(Subject):
    """Subject rating every group 0, so every group is a first choice."""

    def __init__(self, id: int):
        self._id = id

    def id(self) -> int:
        return self._id

    def dissatisfaction(self, group_id: int) -> int:
        return 0
