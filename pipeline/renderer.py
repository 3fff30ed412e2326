"""HTML rendering of the PR report with Jinja2."""

import logging
from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from models.data_models import Report

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
REPORT_TEMPLATE = "result.html"


class ReportRenderError(Exception):
    """The report template could not be loaded or rendered."""


def _get_env(template_dir: Optional[Union[str, Path]] = None) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(template_dir or TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_report(
    report: Report,
    template_dir: Optional[Union[str, Path]] = None,
    template_name: str = REPORT_TEMPLATE
) -> str:
    """Render the report page.

    Args:
        report: Assembled report
        template_dir: Directory holding the template (default: bundled templates)
        template_name: Template file name

    Returns:
        HTML document as a string

    Raises:
        ReportRenderError: If the template is missing or fails to render
    """
    try:
        template = _get_env(template_dir).get_template(template_name)
        return template.render(
            report=report,
            prs=report.pull_requests,
            generated_at=report.generated_at.isoformat(timespec="seconds"),
        )
    except TemplateError as e:
        logger.error(f"Error rendering template {template_name}: {e}")
        raise ReportRenderError(f"Error loading template {template_name}: {e}") from e


def export_report_html(report: Report, output_path: Path) -> Path:
    """Write the rendered report to a file, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_report(report), encoding="utf-8")
    return output_path
