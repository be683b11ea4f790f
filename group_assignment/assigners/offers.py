"""Offers exchanged between registries during propose-and-reject rounds."""

from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple


@total_ordering
@dataclass(frozen=True, eq=False)
class MembershipOffer:
    """What a group offers a subject proposing to become a member.

    Offers sort lexicographically by ``dissatisfaction_rating`` and then by
    ``dissatisfaction_improvement``, where no improvement (nobody has to
    leave) sorts before any eviction and larger evictions sort first.
    Smaller offers are better.
    """

    # How dissatisfied the subject is with the proposed group.
    dissatisfaction_rating: int
    # None if nobody has to leave upon acceptance, otherwise negative:
    # the subject's rating minus the group's current highest rating.
    dissatisfaction_improvement: Optional[int] = None

    def evicts_least_happy_member(self) -> bool:
        return self.dissatisfaction_improvement is not None

    def _sort_key(self) -> Tuple[int, int, int]:
        if self.dissatisfaction_improvement is None:
            return (self.dissatisfaction_rating, 0, 0)
        return (self.dissatisfaction_rating, 1, self.dissatisfaction_improvement)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MembershipOffer):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other: "MembershipOffer") -> bool:
        if not isinstance(other, MembershipOffer):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())


@total_ordering
@dataclass(frozen=True, eq=False)
class TransferralOffer:
    """A membership offer for one particular member of the proposing group.

    Transferral offers compare only by their membership offer; the lookup
    key is ignored.
    """

    # Position of the subject in the proposing registry's member list.
    subject_lookup_key: int
    membership_offer: MembershipOffer

    def replace_least_happy_member_upon_transferral(self) -> bool:
        return self.membership_offer.evicts_least_happy_member()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransferralOffer):
            return NotImplemented
        return self.membership_offer == other.membership_offer

    def __lt__(self, other: "TransferralOffer") -> bool:
        if not isinstance(other, TransferralOffer):
            return NotImplemented
        return self.membership_offer < other.membership_offer

    def __hash__(self) -> int:
        return hash(self.membership_offer)
