"""
Host selection rule: pure computation, no I/O and no side effects.

A participant is available for a round when every eligibility rule passes.
The default rules are independent filters, so extra rules can be supplied
without touching the selection algorithm itself.
"""

import random
from enum import Enum
from typing import AbstractSet, Callable, Iterable, List, Optional, Sequence, Set
from uuid import UUID

from hostpicker.models.api.participants import ParticipantResponse
from hostpicker.models.api.rounds import RoundResponse, RoundState
from hostpicker.models.api.selections import SelectionResponse


class Violation(str, Enum):
    """Reason a participant is not eligible for a round."""

    ARCHIVED = "archived"
    JOINED_AFTER_ROUND = "joined_after_round"
    ALREADY_SELECTED = "already_selected"


EligibilityRule = Callable[
    [ParticipantResponse, RoundResponse, AbstractSet[UUID]], Optional[Violation]
]


def not_archived(
    participant: ParticipantResponse,
    round_: RoundResponse,
    selected_ids: AbstractSet[UUID],
) -> Optional[Violation]:
    return Violation.ARCHIVED if participant.archived else None


def joined_before_round(
    participant: ParticipantResponse,
    round_: RoundResponse,
    selected_ids: AbstractSet[UUID],
) -> Optional[Violation]:
    # Strict: someone registered at the same instant the round began is too new
    if participant.created_at < round_.created_at:
        return None
    return Violation.JOINED_AFTER_ROUND


def not_yet_selected(
    participant: ParticipantResponse,
    round_: RoundResponse,
    selected_ids: AbstractSet[UUID],
) -> Optional[Violation]:
    return Violation.ALREADY_SELECTED if participant.id in selected_ids else None


DEFAULT_RULES: Sequence[EligibilityRule] = (
    not_archived,
    joined_before_round,
    not_yet_selected,
)

_system_random = random.SystemRandom()


def selected_participant_ids(
    round_: RoundResponse, selections: Iterable[SelectionResponse]
) -> Set[UUID]:
    """Ids already chosen in ``round_``; selections of other rounds are ignored."""
    return {s.participant_id for s in selections if s.round_id == round_.id}


def check_eligibility(
    participant: ParticipantResponse,
    round_: RoundResponse,
    selections: Iterable[SelectionResponse],
    rules: Sequence[EligibilityRule] = DEFAULT_RULES,
) -> List[Violation]:
    """Return every rule ``participant`` violates for ``round_`` (empty if eligible)."""
    selected_ids = selected_participant_ids(round_, selections)
    violations = []
    for rule in rules:
        violation = rule(participant, round_, selected_ids)
        if violation is not None:
            violations.append(violation)
    return violations


def compute_available(
    round_: RoundResponse,
    participants: Iterable[ParticipantResponse],
    selections: Iterable[SelectionResponse],
    rules: Sequence[EligibilityRule] = DEFAULT_RULES,
) -> List[ParticipantResponse]:
    """Participants that may still be picked in ``round_``.

    The result is empty exactly when the round is exhausted. Order follows
    the input and carries no meaning.
    """
    selected_ids = selected_participant_ids(round_, selections)
    return [
        p
        for p in participants
        if all(rule(p, round_, selected_ids) is None for rule in rules)
    ]


def select_for(
    round_: RoundResponse,
    participants: Iterable[ParticipantResponse],
    selections: Iterable[SelectionResponse],
    rng: Optional[random.Random] = None,
    rules: Sequence[EligibilityRule] = DEFAULT_RULES,
) -> Optional[ParticipantResponse]:
    """Draw one available participant uniformly at random.

    Returns ``None`` when the round is exhausted; the caller should then
    start a new round instead of recording a selection.
    """
    available = compute_available(round_, participants, selections, rules)
    if not available:
        return None
    return (rng or _system_random).choice(available)


def round_state(
    round_: RoundResponse,
    participants: Iterable[ParticipantResponse],
    selections: Iterable[SelectionResponse],
    rules: Sequence[EligibilityRule] = DEFAULT_RULES,
) -> RoundState:
    if compute_available(round_, participants, selections, rules):
        return RoundState.OPEN
    return RoundState.EXHAUSTED
