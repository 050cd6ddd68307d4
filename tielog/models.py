from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import require, require_valid


@dataclass(eq=False)
class Participant:
    """A member of the social network.

    A participant starts out uninitialized and becomes eligible for links
    once assign_id() fixes its identity. The identity never changes after
    that. Two participants are equal when their identities are equal.
    """

    _id: str | None = field(default=None, init=False)
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None

    @classmethod
    def with_id(cls, participant_id: str, **profile: Any) -> Participant:
        """Create an initialized participant in one step."""
        participant = cls()
        participant.assign_id(participant_id)
        if profile:
            participant.update_profile(**profile)
        return participant

    @property
    def id(self) -> str | None:
        return self._id

    @property
    def is_valid(self) -> bool:
        return self.id is not None

    def assign_id(self, participant_id: str) -> bool:
        """Fix the identity of this participant.

        Returns:
            True if the identity was assigned, False if it was already set
        """
        require(participant_id=participant_id)
        if self.is_valid:
            return False
        self._id = participant_id
        return True

    def set_first_name(self, name: str) -> Participant:
        return self._set_profile_field("first_name", name)

    def set_middle_name(self, name: str) -> Participant:
        return self._set_profile_field("middle_name", name)

    def set_last_name(self, name: str) -> Participant:
        return self._set_profile_field("last_name", name)

    def set_email(self, email: str) -> Participant:
        return self._set_profile_field("email", email)

    def set_phone(self, phone: str) -> Participant:
        return self._set_profile_field("phone", phone)

    def update_profile(self, **fields: str) -> Participant:
        """Set several profile fields at once (first_name=..., email=...)."""
        for name, value in fields.items():
            if name not in _PROFILE_FIELDS:
                raise ValueError(f"Unknown profile field: {name}")
            self._set_profile_field(name, value)
        return self

    def _set_profile_field(self, name: str, value: str) -> Participant:
        require_valid(self.is_valid, "Participant")
        require(**{name: value})
        setattr(self, name, value)
        return self

    @property
    def display_name(self) -> str:
        parts = [p for p in (self.first_name, self.middle_name, self.last_name) if p]
        return " ".join(parts) if parts else str(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Participant):
            return NotImplemented
        return self is other or (self.id is not None and self.id == other.id)

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.id if self.id is not None else "Invalid User: Uninitialized ID"


_PROFILE_FIELDS = frozenset({"first_name", "middle_name", "last_name", "email", "phone"})


@dataclass(frozen=True, eq=False)
class Friend:
    """A participant reached by a neighborhood query, with its hop distance.

    Equality and hashing use the participant only, so a set of friends
    holds each participant once no matter what distance was attempted.
    """

    participant: Participant
    distance: int

    def __post_init__(self) -> None:
        require(participant=self.participant, distance=self.distance)
        require_valid(self.participant.is_valid, "Participant")
        if self.distance < 0:
            raise ValueError(f"distance must be non-negative, got {self.distance}")

    @property
    def id(self) -> str:
        return self.participant.id  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Friend):
            return NotImplemented
        return self.participant == other.participant

    def __hash__(self) -> int:
        return hash(self.participant)

    def __str__(self) -> str:
        return f"Friend {self.id} who is {self.distance} links away."
