"""Assignment related errors."""


class AssignmentError(Exception):
    """Base class for errors raised while assigning subjects to groups."""


class CapacityError(AssignmentError):
    """A group is already full while trying to add another subject."""

    def __init__(self, group_id: int):
        self.group_id = group_id
        super().__init__(
            f"Insufficient capacity: group {group_id} cannot take another subject"
        )


class TotalCapacityError(AssignmentError):
    """The combined group capacity is less than the number of subjects."""

    def __init__(self, total_capacity: int, num_subjects: int):
        self.total_capacity = total_capacity
        self.num_subjects = num_subjects
        super().__init__(
            "Insufficient capacity: the combined group capacity "
            f"({total_capacity}) is less than the number of subjects ({num_subjects})"
        )
