"""Assigner following the "first come first served" principle."""

import logging
from typing import List, Sequence

from ..assignment import Assignment
from ..errors import CapacityError
from ..groups import Group
from ..registry import (
    GroupRegistry,
    assign_from_group_registries,
    best_available_registry,
    most_desired_registry,
)
from ..subjects import Subject
from .base import Assigner

logger = logging.getLogger(__name__)


class FirstComeFirstServed(Assigner):
    """The subjects get assigned to their most preferred available group in turn."""

    name = "first-come-first-served"

    def assign(self, subjects: Sequence[Subject], groups: Sequence[Group]) -> Assignment:
        self.sufficient_capacity(subjects, groups)

        registries = [GroupRegistry(group) for group in groups]
        for subject in subjects:
            register_to_best_available(subject, registries)

        logger.info("Assigned %d subjects to %d groups", len(subjects), len(registries))
        return assign_from_group_registries(registries)


def register_to_best_available(subject: Subject, registries: List[GroupRegistry]) -> None:
    """Register the subject to the non-full registry it minds the least.

    Raises:
        CapacityError: If every registry is full, which the capacity
            precheck rules out
    """
    registry = best_available_registry(subject, registries)
    if registry is None:
        raise CapacityError(most_desired_registry(subject, registries).id())
    registry.register_subject(subject)
