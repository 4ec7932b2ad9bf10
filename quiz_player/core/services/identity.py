"""Participant identity capability consumed by the session controller."""

from __future__ import annotations

from typing import Protocol


class IdentityProvider(Protocol):
    """Resolves the user-facing name of the participant taking the quiz."""

    def get_current_participant_identity(self) -> str | None:
        ...


class InMemoryIdentityStore:
    """Identity provider holding the signed-in participant name in memory."""

    def __init__(self, participant: str | None = None) -> None:
        self._participant = participant

    def set_participant(self, participant: str) -> None:
        self._participant = participant

    def clear(self) -> None:
        self._participant = None

    def get_current_participant_identity(self) -> str | None:
        if self._participant is None:
            return None
        stripped = self._participant.strip()
        return stripped or None
