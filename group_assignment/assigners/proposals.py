"""Group registries able to handle membership and transferral proposals."""

import bisect
import logging
from typing import Dict, Iterable, List, Optional

from ..errors import CapacityError
from ..groups import Group
from ..registry import GroupRegistry
from ..subjects import Subject
from .offers import MembershipOffer, TransferralOffer

logger = logging.getLogger(__name__)


class ProposalHandlingGroupRegistry:
    """Decorates a ``GroupRegistry`` with proposal handling.

    Members are kept sorted by how dissatisfied they are with this group, so
    the least happy member is always the last one, and the highest
    dissatisfaction among the members is cached.
    """

    def __init__(self, group: Group, subjects: Optional[Iterable[Subject]] = None):
        self._delegate = GroupRegistry(group)
        self._highest_dissatisfaction = 0
        for subject in subjects or ():
            self.force_register_subject(subject)

    @property
    def subjects(self) -> List[Subject]:
        return self._delegate.subjects

    @property
    def highest_dissatisfaction(self) -> int:
        return self._highest_dissatisfaction

    def id(self) -> int:
        return self._delegate.id()

    def capacity(self) -> int:
        return self._delegate.capacity()

    def full(self) -> bool:
        return self._delegate.full()

    def overfull(self) -> bool:
        return self._delegate.overfull()

    def subjects_ids_to_group_id(self) -> Dict[int, int]:
        return self._delegate.subjects_ids_to_group_id()

    def group_id_to_subject_ids(self) -> Dict[int, List[int]]:
        return self._delegate.group_id_to_subject_ids()

    def _rating(self, subject: Subject) -> int:
        return subject.dissatisfaction(self.id())

    def _insert(self, subject: Subject) -> None:
        bisect.insort(self._delegate.subjects, subject, key=self._rating)
        self._highest_dissatisfaction = self._rating(self._delegate.subjects[-1])

    def _remove(self, lookup_key: int) -> Subject:
        subject = self._delegate.subjects.pop(lookup_key)
        if self._delegate.subjects:
            self._highest_dissatisfaction = self._rating(self._delegate.subjects[-1])
        else:
            self._highest_dissatisfaction = 0
        return subject

    def register_subject(self, subject: Subject) -> None:
        """Register a subject, keeping the members sorted.

        Raises:
            CapacityError: If the group is already full
        """
        if self.full():
            raise CapacityError(self.id())
        self._insert(subject)

    def force_register_subject(self, subject: Subject) -> None:
        """Register a subject regardless of the group's capacity."""
        self._insert(subject)

    def handle_membership_proposal(self, subject: Subject) -> Optional[MembershipOffer]:
        """Answer a subject asking to become a member of this group.

        An offer is given if the group is not full, or if the subject is more
        eager to be a member than the currently most dissatisfied member, who
        would then have to leave.

        Args:
            subject: The proposing subject

        Returns:
            The membership offer, or None if the group declines
        """
        dissatisfaction_rating = self._rating(subject)
        if not self.full():
            return MembershipOffer(dissatisfaction_rating, None)

        dissatisfaction_improvement = dissatisfaction_rating - self._highest_dissatisfaction
        if dissatisfaction_improvement >= 0:
            return None
        return MembershipOffer(dissatisfaction_rating, dissatisfaction_improvement)

    def propose_transferral(
        self, other: "ProposalHandlingGroupRegistry"
    ) -> Optional[TransferralOffer]:
        """Propose to another group to take one of this group's members.

        The member proposed is the one who minds being in the other group the
        least (the first such member on ties).

        Args:
            other: Registry of the group receiving the proposal

        Returns:
            Transferral offer for that member, or None if the other group declines
        """
        if not self._delegate.subjects:
            return None

        other_id = other.id()
        lookup_key = min(
            range(len(self._delegate.subjects)),
            key=lambda key: self._delegate.subjects[key].dissatisfaction(other_id),
        )
        membership_offer = other.handle_membership_proposal(self._delegate.subjects[lookup_key])
        if membership_offer is None:
            return None
        return TransferralOffer(lookup_key, membership_offer)

    def transfer(
        self, other: "ProposalHandlingGroupRegistry", offer: TransferralOffer
    ) -> Optional[Subject]:
        """Move the member referred to by the offer into the other group.

        Args:
            other: Registry that produced the offer
            offer: Offer obtained from ``propose_transferral(other)``

        Returns:
            The other group's former least happy member if it had to make room,
            otherwise None
        """
        subject = self._remove(offer.subject_lookup_key)
        replaced = None
        if offer.replace_least_happy_member_upon_transferral():
            replaced = other._remove(len(other.subjects) - 1)
            logger.debug(
                "Subject %s replaces subject %s in group %s",
                subject.id(), replaced.id(), other.id(),
            )
        other.register_subject(subject)
        logger.debug(
            "Transferred subject %s from group %s to group %s",
            subject.id(), self.id(), other.id(),
        )
        return replaced

    def __repr__(self) -> str:
        return (
            f"ProposalHandlingGroupRegistry(group={self.id()}, capacity={self.capacity()}, "
            f"subjects={[subject.id() for subject in self.subjects]})"
        )
