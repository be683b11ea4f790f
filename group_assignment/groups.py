"""Groups: the capacity bounded destinations subjects choose from."""

from abc import ABC, abstractmethod


class Group(ABC):
    """A group subjects may be assigned to."""

    @abstractmethod
    def id(self) -> int:
        """The group's id."""

    @abstractmethod
    def capacity(self) -> int:
        """Maximum number of simultaneous members."""


class DefaultGroup(Group):
    """Plain group holding an id and a capacity."""

    def __init__(self, id: int, capacity: int):
        if capacity < 0:
            raise ValueError(f"Group {id} has a negative capacity: {capacity}")
        self._id = id
        self._capacity = capacity

    def id(self) -> int:
        return self._id

    def capacity(self) -> int:
        return self._capacity

    def __repr__(self) -> str:
        return f"DefaultGroup(id={self._id}, capacity={self._capacity})"
