"""
PR Showcase - web view of a GitHub user's pull requests.

Provides a FastAPI backend that renders the aggregated PR report as HTML
and exposes the same data as JSON.
"""
