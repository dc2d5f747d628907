# in-memory state + helpers
import logging
import threading
from typing import Dict, Iterable, Optional, Tuple

from .errors import InvalidCategory

logger = logging.getLogger(__name__)


class VoteStore:
    """
    Current vote per user plus the aggregate tally per category.

    tally[category] = number of accepted votes currently attributed to it
    user_votes[user_id] = category the user last voted for

    Both maps are guarded by one lock; every read of aggregate state goes
    through snapshot() and every write through cast_vote().
    """

    def __init__(self, categories: Iterable[str]):
        cats = tuple(categories)
        if not cats:
            raise ValueError("At least one vote category is required")
        if any(not c for c in cats):
            raise ValueError("Vote categories must be non-empty labels")
        if len(set(cats)) != len(cats):
            raise ValueError(f"Duplicate vote categories: {cats}")

        self._categories: Tuple[str, ...] = cats
        self._tally: Dict[str, int] = {c: 0 for c in cats}
        self._user_votes: Dict[str, str] = {}
        self._lock = threading.Lock()

    @property
    def categories(self) -> Tuple[str, ...]:
        return self._categories

    def cast_vote(self, user_id: str, category: str) -> None:
        """
        Record `category` as the user's current vote.

        A switch moves one vote from the previous category to the new one.
        The new category is incremented even when it equals the previous one.
        """
        if category not in self._tally:
            raise InvalidCategory(category, self._categories)

        with self._lock:
            previous = self._user_votes.get(user_id)
            if previous is not None and previous != category:
                self._tally[previous] -= 1
            self._tally[category] += 1
            self._user_votes[user_id] = category
            counts = dict(self._tally)

        logger.info("Vote received: user_id=%s, vote=%s", user_id, category)
        logger.info("Current counts: %s", counts)

    def snapshot(self) -> Dict[str, int]:
        """
        Point-in-time copy of the tally.
        """
        with self._lock:
            return dict(self._tally)

    def current_vote(self, user_id: str) -> Optional[str]:
        with self._lock:
            return self._user_votes.get(user_id)

    def voter_count(self) -> int:
        with self._lock:
            return len(self._user_votes)
