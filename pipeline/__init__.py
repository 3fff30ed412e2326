"""Aggregation pipeline: search, logos, commit cleanup and rendering."""

from pipeline.aggregator import PRAggregator
from pipeline.commit_normalizer import normalize
from pipeline.logo_cache import RepositoryLogoCache
from pipeline.renderer import ReportRenderError, render_report
from pipeline.report_assembler import ReportAssembler, fetch_normalized_commits

__all__ = [
    "PRAggregator",
    "RepositoryLogoCache",
    "ReportAssembler",
    "ReportRenderError",
    "fetch_normalized_commits",
    "normalize",
    "render_report",
]
