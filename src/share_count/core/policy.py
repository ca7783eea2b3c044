"""Age-based staleness policy for cached share counts."""

from __future__ import annotations

import time
from typing import Optional, Sequence

from share_count.core.config import StalenessRule, default_staleness_rules


class StalenessPolicy:
    """Decide whether a subject's cached counts must be re-fetched.

    Rules are scanned newest first and the first rule whose age boundary the
    subject satisfies supplies the refresh interval. A subject sits inside a
    rule when ``publish_time >= now - max_subject_age``, so content published
    exactly on a boundary gets the shorter interval. Subjects without a
    publish date always fall through to the trailing catch-all rule.

    Example:
        policy = StalenessPolicy()
        policy.needs_refresh(last_refresh_time=None, subject_publish_time=None)
        # True, nothing was ever fetched
    """

    def __init__(self, rules: Sequence[StalenessRule] | None = None) -> None:
        self._rules = list(rules) if rules is not None else default_staleness_rules()
        if not self._rules or self._rules[-1].max_subject_age is not None:
            raise ValueError("staleness rules must end with a catch-all rule")

    @property
    def rules(self) -> list[StalenessRule]:
        return list(self._rules)

    def refresh_interval_for(
        self, subject_publish_time: Optional[int], now: Optional[float] = None
    ) -> int:
        """Return the refresh interval (seconds) for a subject's age tier."""
        if now is None:
            now = time.time()
        for rule in self._rules:
            if rule.max_subject_age is None:
                return rule.refresh_interval
            if subject_publish_time is None:
                continue
            if subject_publish_time >= now - rule.max_subject_age:
                return rule.refresh_interval
        return self._rules[-1].refresh_interval

    def needs_refresh(
        self,
        last_refresh_time: Optional[int],
        subject_publish_time: Optional[int],
        now: Optional[float] = None,
    ) -> bool:
        """Check whether the cached payload is older than its tier allows."""
        if last_refresh_time is None:
            return True
        if now is None:
            now = time.time()
        interval = self.refresh_interval_for(subject_publish_time, now)
        return last_refresh_time < now - interval
