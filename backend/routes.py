"""
Routes for the PR report.

Every request runs the whole pipeline once: search the author's PRs,
resolve logos, fetch and clean commits, then render.
"""

import logging
from functools import lru_cache
from typing import Any, Dict

import requests
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from fetchers.github import GitHubFetcher
from models.config_models import Config
from models.data_models import Report
from pipeline.renderer import ReportRenderError, render_report
from pipeline.report_assembler import ReportAssembler
from utils.config_loader import load_config

logger = logging.getLogger(__name__)

router = APIRouter(tags=["report"])


@lru_cache()
def get_config() -> Config:
    """Process-wide configuration, loaded once."""
    return load_config()


def get_assembler(config: Config = Depends(get_config)) -> ReportAssembler:
    """Fresh assembler per request so logo caches are never shared."""
    fetcher = GitHubFetcher(config)
    return ReportAssembler(fetcher, commit_workers=config.commit_workers)


def _build_report(assembler: ReportAssembler) -> Report:
    """Run the pipeline, mapping failures to HTTP errors."""
    try:
        report = assembler.run()
    except requests.RequestException as e:
        logger.error(f"Error fetching PRs: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch pull requests from GitHub")

    if not report.total:
        raise HTTPException(status_code=404, detail="No matching PRs found.")

    return report


@router.get("/", response_class=HTMLResponse)
def report_page(assembler: ReportAssembler = Depends(get_assembler)):
    """Render the PR report as HTML."""
    report = _build_report(assembler)

    try:
        html = render_report(report)
    except ReportRenderError as e:
        logger.error(f"Error loading template: {e}")
        raise HTTPException(status_code=500, detail="Error loading template")

    return HTMLResponse(content=html)


@router.get("/api/prs")
def report_json(assembler: ReportAssembler = Depends(get_assembler)) -> Dict[str, Any]:
    """
    Return the same report as JSON.

    Returns:
    - total: Number of PRs
    - repositories: Distinct repositories, first-seen order
    - generated_at: Report timestamp
    - pull_requests: PR details, each with its cleaned commits
    """
    report = _build_report(assembler)
    return {
        "total": report.total,
        "repositories": report.repositories,
        **report.model_dump(mode="json"),
    }


@router.get("/health")
def health() -> Dict[str, str]:
    """Liveness check; does not call GitHub."""
    return {"status": "ok"}
