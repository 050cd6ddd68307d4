"""Temporal link between two participants.

A link keeps a flat, append-only log of event dates. Entries at even
positions are establish events and entries at odd positions are tear-down
events, so the link's state at any date can be read back from the log
without storing explicit intervals. Dates never decrease along the log;
equal dates are allowed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from .dates import as_date
from .errors import require, require_valid
from .models import Participant
from .status import NetworkStatus

logger = logging.getLogger(__name__)


class Link:
    """Activity history between exactly two participants.

    A new Link is a placeholder: every date or activity operation raises
    UninitializedObjectError until set_participants() succeeds.
    """

    def __init__(self) -> None:
        self._participants: frozenset[Participant] | None = None
        self._events: list[date] = []

    @property
    def is_valid(self) -> bool:
        return self._participants is not None

    @property
    def participants(self) -> frozenset[Participant]:
        require_valid(self.is_valid, "Link")
        return self._participants  # type: ignore[return-value]

    @property
    def events(self) -> tuple[date, ...]:
        """Recorded event dates in order (establish, tear-down, establish, ...)."""
        return tuple(self._events)

    def set_participants(self, participants: Iterable[Participant], strict: bool = True) -> NetworkStatus:
        """Assign the two participants of this link, once.

        Args:
            participants: Exactly two distinct participants
            strict: Also reject participants that have no identity yet

        Returns:
            SUCCESS, ALREADY_VALID if a pair was assigned before, or
            INVALID_USERS if the pair is not acceptable
        """
        require(participants=participants)
        pair = frozenset(participants)

        if self.is_valid:
            return NetworkStatus.ALREADY_VALID

        if len(pair) != 2:
            logger.debug(f"Rejected link pair of size {len(pair)}")
            return NetworkStatus.INVALID_USERS

        if strict and not all(p.is_valid for p in pair):
            logger.debug("Rejected link pair containing an uninitialized participant")
            return NetworkStatus.INVALID_USERS

        self._participants = pair
        return NetworkStatus.SUCCESS

    def other(self, participant: Participant) -> Participant:
        """Return the endpoint opposite to the given participant."""
        require(participant=participant)
        pair = self.participants
        if participant not in pair:
            raise ValueError(f"{participant} is not part of {self!r}")
        (other,) = pair - {participant}
        return other

    def establish(self, when: date) -> NetworkStatus:
        """Establish the link at the given date."""
        return self._change(when, establishing=True)

    def tear_down(self, when: date) -> NetworkStatus:
        """Tear the link down at the given date."""
        return self._change(when, establishing=False)

    def is_active(self, when: date) -> bool:
        """Return whether the link was active on the given date.

        The log is scanned in order. The date is active when it equals an
        establish entry, or when the first entry strictly after it is a
        tear-down. With no entry after it, the date is active only if the
        last recorded event was an establish. Establish vs tear-down is
        decided by position in the log, never by comparing values.
        """
        require(when=when)
        require_valid(self.is_valid, "Link")
        when = as_date(when)

        for index, event in enumerate(self._events):
            if when == event and _is_establish_position(index):
                return True
            if when < event:
                # Nearest later boundary decides
                return not _is_establish_position(index)

        if not self._events:
            return False
        return when > self._events[-1] and _is_establish_position(len(self._events) - 1)

    def first_event(self) -> date | None:
        """Date of the first recorded event, or None when there is none."""
        require_valid(self.is_valid, "Link")
        return self._events[0] if self._events else None

    def next_event(self, when: date) -> date | None:
        """Earliest recorded date strictly after the given date, or None."""
        require(when=when)
        require_valid(self.is_valid, "Link")
        when = as_date(when)
        return next((event for event in self._events if event > when), None)

    def _change(self, when: date, establishing: bool) -> NetworkStatus:
        require(when=when)
        require_valid(self.is_valid, "Link")
        when = as_date(when)
        action = "establish" if establishing else "tear down"

        if len(self._events) >= 2 and when < self._events[-1]:
            logger.debug(f"Cannot {action} {self!r} at {when}: precedes last event {self._events[-1]}")
            return NetworkStatus.INVALID_DATE

        active = self.is_active(when)
        if establishing and active:
            logger.debug(f"Cannot establish {self!r} at {when}: already active")
            return NetworkStatus.ALREADY_ACTIVE
        if not establishing and not active:
            logger.debug(f"Cannot tear down {self!r} at {when}: already inactive")
            return NetworkStatus.ALREADY_INACTIVE

        if not self._accepts(when, establishing):
            status = self._parity_rejection(when, establishing)
            logger.debug(f"Cannot {action} {self!r} at {when}: {status.value}")
            return status

        self._events.append(when)
        logger.debug(f"{action.capitalize()} {self!r} at {when} (event #{len(self._events)})")
        return NetworkStatus.SUCCESS

    def _accepts(self, when: date, establishing: bool) -> bool:
        """Check that appending keeps the log alternating and non-decreasing."""
        if not self._events:
            return establishing
        if when < self._events[-1]:
            return False
        # An even-length log ends with a tear-down, so the next entry is an establish
        return (len(self._events) % 2 == 0) == establishing

    def _parity_rejection(self, when: date, establishing: bool) -> NetworkStatus:
        if self._events and when < self._events[-1]:
            return NetworkStatus.INVALID_DATE
        return NetworkStatus.ALREADY_ACTIVE if establishing else NetworkStatus.ALREADY_INACTIVE

    def __repr__(self) -> str:
        if not self.is_valid:
            return "Link(uninitialized)"
        first, second = sorted(str(p) for p in self.participants)
        return f"Link between: {first} and {second}"


def _is_establish_position(index: int) -> bool:
    return index % 2 == 0
