"""Build the report: aggregated PRs plus their cleaned commit histories."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import requests

from fetchers.github import GitHubFetcher
from models.data_models import Commit, PullRequest, PullRequestDetail, Report
from pipeline.aggregator import PRAggregator
from pipeline.commit_normalizer import normalize

logger = logging.getLogger(__name__)


def fetch_normalized_commits(fetcher: GitHubFetcher, pr: PullRequest) -> list[Commit]:
    """Fetch and normalize a PR's commits.

    Failures only affect this PR: they are logged and an empty list is
    returned.
    """
    try:
        raw_commits = fetcher.fetch_commits(pr.repository_id, pr.number)
        return normalize(raw_commits)
    except (requests.RequestException, TypeError, ValueError) as e:
        logger.warning(f"Error fetching commits for PR #{pr.number} in {pr.repository_id}: {e}")
        return []


class ReportAssembler:
    """Turn aggregated PRs into a Report.

    Commits are fetched one PR at a time unless ``commit_workers`` is above
    one, in which case a bounded thread pool is used. Either way the report
    lists PRs in the order the aggregator produced them.
    """

    def __init__(
        self,
        fetcher: GitHubFetcher,
        aggregator: Optional[PRAggregator] = None,
        commit_workers: int = 1
    ):
        self.fetcher = fetcher
        self.aggregator = aggregator or PRAggregator(fetcher)
        self.commit_workers = max(1, commit_workers)

    def _detail(self, pr: PullRequest) -> PullRequestDetail:
        return PullRequestDetail(
            pull_request=pr,
            commits=fetch_normalized_commits(self.fetcher, pr)
        )

    def build(self, pull_requests: list[PullRequest]) -> Report:
        """Attach commits to every PR.

        Raises:
            ValueError: If a PR reaches the report without a resolved logo
        """
        for pr in pull_requests:
            if pr.logo_url is None:
                raise ValueError(
                    f"PR #{pr.number} in {pr.repository_id} has no logo_url; "
                    "run it through PRAggregator first"
                )

        if self.commit_workers > 1 and len(pull_requests) > 1:
            with ThreadPoolExecutor(max_workers=self.commit_workers) as executor:
                # map() yields in submission order
                details = list(executor.map(self._detail, pull_requests))
        else:
            details = [self._detail(pr) for pr in pull_requests]

        commit_total = sum(len(detail.commits) for detail in details)
        logger.info(f"Assembled report: {len(details)} PRs, {commit_total} commits")
        return Report(pull_requests=details)

    def run(self) -> Report:
        """Aggregate PRs and build the full report.

        An empty report means the author has no matching PRs; no commit
        requests are made in that case.

        Raises:
            requests.RequestException: If the PR search fails
        """
        return self.build(self.aggregator.aggregate())
