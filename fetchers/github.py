"""GitHub API client for the PR report.

Three endpoints are used:
- Search (critical): paginated issue search for the author's PRs. Any
  failure here aborts the report.
- Repository details (best effort): owner avatar used as repository logo.
- PR commits (best effort): raw commit list for one PR.
"""

import logging
from typing import Any, Optional

import requests

from models.config_models import Config
from models.data_models import LogoResult, PullRequest

logger = logging.getLogger(__name__)


class GitHubResponseError(requests.RequestException):
    """GitHub answered with a payload that does not have the expected shape."""


class GitHubFetcher:
    """Fetch pull request data for a single GitHub author."""

    def __init__(self, config: Config):
        """Initialize GitHub API client.

        Args:
            config: Validated application config (credentials and API limits)
        """
        self.username = config.credentials.github_username
        self.token = config.credentials.github_token
        self.settings = config.github
        self.base_url = config.github.api_base_url
        self.headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self.token}",
            "X-GitHub-Api-Version": "2022-11-28"
        }

    def _make_github_request(
        self,
        url: str,
        timeout: float,
        params: Optional[dict] = None
    ) -> requests.Response:
        """Make a single GitHub API request.

        No retries and no rate-limit waiting: the timeout bounds each call.

        Raises:
            requests.RequestException: On transport errors or timeouts
        """
        return requests.get(url, headers=self.headers, params=params, timeout=timeout)

    def build_search_query(self, query_qualifier: str) -> str:
        """Search query for this author's PRs, e.g. 'author:octocat type:pr is:open'."""
        return f"author:{self.username} type:pr {query_qualifier}".strip()

    def extract_repo_name(self, repository_url: str) -> str:
        """Convert an API repository URL to 'owner/repo'.

        URLs without the '{base_url}/repos/' prefix are returned unchanged.
        """
        prefix = f"{self.base_url}/repos/"
        if repository_url.startswith(prefix):
            return repository_url[len(prefix):]
        return repository_url

    def _to_pull_request(self, item: dict[str, Any]) -> PullRequest:
        return PullRequest(
            title=item["title"],
            url=item["html_url"],
            repository_id=self.extract_repo_name(item["repository_url"]),
            number=item["number"],
            created_at=item["created_at"],
        )

    def fetch_prs(self, query_qualifier: str) -> list[PullRequest]:
        """Fetch every PR by the author matching a search qualifier.

        Walks the search endpoint page by page (oldest first) until a page
        comes back empty or shorter than the page size. Results keep the
        order GitHub returned them in.

        Args:
            query_qualifier: Extra search filter, e.g. "is:open" or "is:merged"

        Returns:
            List of PullRequest models without logos

        Raises:
            requests.RequestException: On transport errors, HTTP errors or
                undecodable payloads. No partial result is returned.
        """
        url = f"{self.base_url}/search/issues"
        per_page = self.settings.page_size
        query = self.build_search_query(query_qualifier)

        logger.info(f"Searching PRs: {query}")

        prs: list[PullRequest] = []
        page = 1

        while True:
            params = {
                "q": query,
                "sort": "created",
                "order": "asc",
                "per_page": per_page,
                "page": page
            }

            try:
                response = self._make_github_request(
                    url, timeout=self.settings.search_timeout, params=params
                )

                if response.status_code in (401, 403):
                    logger.error(
                        f"Authentication error: {response.status_code} - "
                        f"{response.text[:200]}"
                    )
                response.raise_for_status()

                payload = response.json()
                items = payload.get("items") if isinstance(payload, dict) else None
                if not isinstance(items, list):
                    raise GitHubResponseError(
                        f"Search response for page {page} has no 'items' list"
                    )

                page_prs = [self._to_pull_request(item) for item in items]

            except (KeyError, TypeError, ValueError) as e:
                # Malformed item or invalid JSON body
                logger.error(f"Error decoding search page {page} for '{query}': {e}")
                raise GitHubResponseError(f"Undecodable search page {page}: {e}") from e
            except requests.RequestException as e:
                logger.error(f"Error fetching search page {page} for '{query}': {e}")
                raise

            if not page_prs:
                logger.debug(f"Page {page} is empty, stopping pagination")
                break

            prs.extend(page_prs)
            logger.debug(f"Page {page}: {len(page_prs)} PRs (total: {len(prs)})")

            if len(page_prs) < per_page:
                break
            page += 1

        logger.info(f"Found {len(prs)} PRs for '{query}' in {page} page(s)")
        return prs

    def resolve_logo(self, repository_id: str) -> LogoResult:
        """Look up the avatar of a repository's owner.

        Never raises: any failure is logged and reported as a failed result
        so the report can still be rendered without the logo.

        Args:
            repository_id: Repository in 'owner/repo' format

        Returns:
            LogoResult.resolved(avatar_url) or LogoResult.failed(reason)
        """
        url = f"{self.base_url}/repos/{repository_id}"

        try:
            response = self._make_github_request(url, timeout=self.settings.logo_timeout)

            if response.status_code != 200:
                reason = f"failed to get repo details, status: {response.status_code}"
                logger.warning(f"Error fetching logo for repo {repository_id}: {reason}")
                return LogoResult.failed(reason)

            avatar_url = response.json()["owner"]["avatar_url"]
            if not isinstance(avatar_url, str):
                raise TypeError(f"avatar_url is {type(avatar_url).__name__}, expected str")

        except (requests.RequestException, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Error fetching logo for repo {repository_id}: {e}")
            return LogoResult.failed(str(e))

        logger.debug(f"Resolved logo for {repository_id}")
        return LogoResult.resolved(avatar_url)

    def fetch_commits(self, repository_id: str, pr_number: int) -> list[dict[str, Any]]:
        """Fetch the raw commit list of a PR.

        Args:
            repository_id: Repository in 'owner/repo' format
            pr_number: Pull request number

        Returns:
            List of raw GitHub commit objects, oldest first

        Raises:
            requests.RequestException: On transport, HTTP or decode errors
        """
        url = f"{self.base_url}/repos/{repository_id}/pulls/{pr_number}/commits"

        response = self._make_github_request(url, timeout=self.settings.commits_timeout)
        response.raise_for_status()

        commits = response.json()
        if not isinstance(commits, list):
            raise GitHubResponseError(
                f"Commit list for PR #{pr_number} in {repository_id} is not a list"
            )

        logger.debug(f"Fetched {len(commits)} commits for PR #{pr_number} in {repository_id}")
        return commits
