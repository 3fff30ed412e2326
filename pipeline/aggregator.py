"""Collect the author's open and merged PRs into one list with logos."""

import logging
from typing import Sequence

from fetchers.github import GitHubFetcher
from models.data_models import PullRequest
from pipeline.logo_cache import RepositoryLogoCache

logger = logging.getLogger(__name__)

DEFAULT_QUALIFIERS = ("is:open", "is:merged")


class PRAggregator:
    """Run one search per qualifier and attach repository logos.

    Results are concatenated in qualifier order (open PRs first, then merged
    ones) without re-sorting. Each distinct repository is looked up once per
    ``aggregate()`` call.
    """

    def __init__(self, fetcher: GitHubFetcher, qualifiers: Sequence[str] = DEFAULT_QUALIFIERS):
        self.fetcher = fetcher
        self.qualifiers = tuple(qualifiers)

    def aggregate(self) -> list[PullRequest]:
        """Fetch all PRs for every qualifier and resolve their logos.

        Returns:
            PRs with ``logo_url`` set (empty string when the lookup failed).
            An empty list means the author has no matching PRs.

        Raises:
            requests.RequestException: If any search page fails
        """
        prs: list[PullRequest] = []
        for qualifier in self.qualifiers:
            prs.extend(self.fetcher.fetch_prs(qualifier))

        if not prs:
            logger.info("No PRs found for any qualifier")
            return prs

        logo_cache = RepositoryLogoCache(self.fetcher.resolve_logo)
        for pr in prs:
            pr.logo_url = logo_cache.get(pr.repository_id).logo_url

        logger.info(
            f"Aggregated {len(prs)} PRs from {len(logo_cache)} repositories "
            f"({logo_cache.lookups} logo lookups)"
        )
        return prs
