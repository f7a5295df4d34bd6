"""Aging review of quarantined files.

Finds log entries whose files have stayed in quarantine for at least a
given number of days and are still present on disk.
"""

import logging
import os
from collections.abc import Callable
from datetime import datetime

from filejanitor.core.store import QuarantineStore
from filejanitor.models.quarantine import AgedEntry
from filejanitor.models.timestamps import utc_now

logger = logging.getLogger(__name__)

# Default retention threshold in days.
DEFAULT_THRESHOLD_DAYS = 30


class AgingReviewer:
    """Selects aged entries from a quarantine log.

    Args:
        store: Quarantine log to review.
        clock: Callable returning the current aware datetime.
    """

    def __init__(
        self,
        store: QuarantineStore,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._clock = clock

    def find_aged(self, threshold_days: int = DEFAULT_THRESHOLD_DAYS) -> list[AgedEntry]:
        """Return entries at least threshold_days old whose file still exists.

        Results follow log order, not age order. Entries whose file is
        gone are dropped silently.

        Args:
            threshold_days: Minimum age in whole days.

        Returns:
            List of AgedEntry in log order.

        Raises:
            ValueError: If threshold_days is negative.
        """
        if threshold_days < 0:
            msg = f"Threshold must be zero or more days, got {threshold_days}"
            raise ValueError(msg)

        now = self._clock()
        aged: list[AgedEntry] = []

        for entry in self._store.read():
            age = entry.age_days(now)
            if age < threshold_days:
                continue
            try:
                os.stat(entry.path)
            except OSError:
                logger.debug("Quarantined file no longer on disk: %s", entry.path)
                continue
            aged.append(AgedEntry(entry=entry, age_days=age))

        return aged
