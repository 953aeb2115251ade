"""In-memory volunteer-event matching store."""

import logging
import threading
from datetime import date

from volunteer_api.schemas.match import Match

logger = logging.getLogger(__name__)


class DuplicateMatchError(ValueError):
    """Raised when a volunteer/event pair is matched twice and duplicates are disabled."""

    def __init__(self, volunteer_id: int, event_id: int) -> None:
        super().__init__(f"Volunteer {volunteer_id} is already matched to event {event_id}")
        self.volunteer_id = volunteer_id
        self.event_id = event_id


class MatchingStore:
    """Holds volunteer-to-event assignments in insertion order."""

    def __init__(self, allow_duplicates: bool = True) -> None:
        """
        Initialize an empty store.

        Args:
            allow_duplicates: Whether the same (volunteer, event) pair may be
                stored more than once
        """
        self.allow_duplicates = allow_duplicates
        self._matches: list[Match] = []
        self._lock = threading.Lock()

    def create(self, volunteer_id: int, event_id: int) -> Match:
        """
        Append a match dated today.

        Raises:
            DuplicateMatchError: If duplicates are disabled and the pair exists
        """
        volunteer_id = int(volunteer_id)
        event_id = int(event_id)
        with self._lock:
            if not self.allow_duplicates and self._find(volunteer_id, event_id):
                raise DuplicateMatchError(volunteer_id, event_id)
            match = Match(
                volunteer_id=volunteer_id,
                event_id=event_id,
                date_matched=date.today(),
            )
            self._matches.append(match)
        logger.info("Matched volunteer %s to event %s", volunteer_id, event_id)
        return match.model_copy()

    def list_all(self) -> list[Match]:
        """Return every match, oldest first."""
        with self._lock:
            return [match.model_copy() for match in self._matches]

    def list_by_volunteer(self, volunteer_id: int) -> list[Match]:
        """Return the matches of one volunteer, oldest first."""
        volunteer_id = int(volunteer_id)
        with self._lock:
            return [
                match.model_copy()
                for match in self._matches
                if match.volunteer_id == volunteer_id
            ]

    def exists(self, volunteer_id: int, event_id: int) -> bool:
        with self._lock:
            return bool(self._find(int(volunteer_id), int(event_id)))

    def delete(self, volunteer_id: int, event_id: int) -> bool:
        """Remove every match for the pair. Returns whether anything was removed."""
        volunteer_id = int(volunteer_id)
        event_id = int(event_id)
        with self._lock:
            before = len(self._matches)
            self._matches = [
                match
                for match in self._matches
                if not (match.volunteer_id == volunteer_id and match.event_id == event_id)
            ]
            removed = before - len(self._matches)
        if removed:
            logger.info(
                "Removed %d match(es) of volunteer %s to event %s", removed, volunteer_id, event_id
            )
        return removed > 0

    def _find(self, volunteer_id: int, event_id: int) -> list[Match]:
        # Caller holds the lock.
        return [
            match
            for match in self._matches
            if match.volunteer_id == volunteer_id and match.event_id == event_id
        ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._matches)
