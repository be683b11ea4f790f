"""Assigner inspired by the Gale-Shapley (propose-and-reject) algorithm."""

import logging
from typing import List, Sequence, Tuple

from ..assignment import Assignment
from ..groups import Group
from ..registry import assign_from_group_registries, best_available_registry, most_desired_registry
from ..subjects import Subject
from .base import Assigner
from .proposals import ProposalHandlingGroupRegistry

logger = logging.getLogger(__name__)

Registries = List[ProposalHandlingGroupRegistry]


class ProposeAndReject(Assigner):
    """Assigns in a manner inspired by the Gale-Shapley algorithm.

    First every subject is assigned to the group of their first choice (the
    first group they rate 0), regardless of capacity. Then, as long as some
    groups are overfull, every overfull group proposes to the groups with
    room to accept one of its members.

    A proposed group says "no" if it is full and all its current members are
    at least as satisfied with it as the subject proposed. Otherwise it
    accepts, but if it is already at full capacity it first discards its
    most dissatisfied member, who returns to the group they mind the least
    among the groups without room, regardless of capacity. This continues
    until no group is overfull.
    """

    name = "propose-and-reject"

    def assign(self, subjects: Sequence[Subject], groups: Sequence[Group]) -> Assignment:
        self.sufficient_capacity(subjects, groups)

        registries = first_step(subjects, groups)
        overfull, bystanders, available = partition(registries)

        rounds = 0
        while overfull:
            rounds += 1
            logger.debug(
                "Proposal round %d: %d overfull, %d bystanders, %d available",
                rounds, len(overfull), len(bystanders), len(available),
            )
            overfull, bystanders = proposal_round(overfull, bystanders, available)

        logger.info(
            "Assigned %d subjects to %d groups after %d proposal rounds",
            len(subjects), len(registries), rounds,
        )
        return assign_from_group_registries(available + bystanders)


def first_step(subjects: Sequence[Subject], groups: Sequence[Group]) -> Registries:
    """Register every subject to the registry of their first choice.

    A subject rating more than one group 0 goes to the first of them. Subjects
    rating every group above 0 go to their best non-full group, or to their
    best group outright if all are full.
    """
    registries: Registries = []
    unprocessed = list(subjects)

    for group in groups:
        group_id = group.id()
        first_choosers = [s for s in unprocessed if s.dissatisfaction(group_id) == 0]
        unprocessed = [s for s in unprocessed if s.dissatisfaction(group_id) != 0]
        registries.append(ProposalHandlingGroupRegistry(group, first_choosers))
        logger.debug("Group %s is the first choice of %d subjects", group_id, len(first_choosers))

    for subject in unprocessed:
        registry = best_available_registry(subject, registries)
        if registry is None:
            most_desired_registry(subject, registries).force_register_subject(subject)
        else:
            registry.register_subject(subject)

    return registries


def partition(registries: Registries) -> Tuple[Registries, Registries, Registries]:
    """Split registries into overfull, bystanders (exactly full) and available."""
    overfull = [r for r in registries if r.overfull()]
    bystanders = [r for r in registries if r.full() and not r.overfull()]
    available = [r for r in registries if not r.full()]
    return overfull, bystanders, available


def proposal_round(
    overfull: Registries, bystanders: Registries, available: Registries
) -> Tuple[Registries, Registries]:
    """Let every overfull registry hand over one member to an available registry.

    ``available`` is updated in place and keeps all its registries, full or
    not.

    Returns:
        The overfull registries and bystanders for the next round
    """
    subjects_for_reprocessing: List[Subject] = []

    for overfull_registry in overfull:
        # Some available registry is under capacity while any registry is
        # overfull, and it accepts anyone, so an offer always exists.
        offers = [
            (offer, destination)
            for destination in available
            if (offer := overfull_registry.propose_transferral(destination)) is not None
        ]
        offer, destination = min(offers, key=lambda pair: pair[0])

        replaced = overfull_registry.transfer(destination, offer)
        if replaced is not None:
            subjects_for_reprocessing.append(replaced)

    return registries_for_next_round(overfull, bystanders, subjects_for_reprocessing)


def registries_for_next_round(
    overfull: Registries, bystanders: Registries, subjects_for_reprocessing: List[Subject]
) -> Tuple[Registries, Registries]:
    """Return replaced subjects to the registries without room and re-partition them."""
    registries_for_update = overfull + bystanders
    for subject in subjects_for_reprocessing:
        registry = most_desired_registry(subject, registries_for_update)
        registry.force_register_subject(subject)
        logger.debug("Subject %s returns to group %s", subject.id(), registry.id())

    next_overfull = [r for r in registries_for_update if r.overfull()]
    next_bystanders = [r for r in registries_for_update if not r.overfull()]
    return next_overfull, next_bystanders
