"""Per-run memoization of repository logo lookups."""

import logging
from typing import Callable

from models.data_models import LogoResult

logger = logging.getLogger(__name__)

LogoResolver = Callable[[str], LogoResult]


class RepositoryLogoCache:
    """Resolve each repository's logo at most once.

    Failed lookups are cached like successful ones and are not retried.
    A cache lives for a single aggregation and is never shared between
    report requests.
    """

    def __init__(self, resolver: LogoResolver):
        self._resolver = resolver
        self._entries: dict[str, LogoResult] = {}
        self.lookups = 0

    def get(self, repository_id: str) -> LogoResult:
        """Cached result for a repository, resolving it on first use."""
        if repository_id in self._entries:
            return self._entries[repository_id]

        self.lookups += 1
        result = self._resolver(repository_id)
        if not result.ok:
            logger.debug(f"Caching failed logo lookup for {repository_id}: {result.error}")
        self._entries[repository_id] = result
        return result

    def __len__(self) -> int:
        return len(self._entries)
