"""Local template sources: file reading and HTML minification."""

from __future__ import annotations

from pathlib import Path

import minify_html

from template_sync.config import SyncConfig
from template_sync.exceptions import FileReadError
from template_sync.models import TemplateSpec
from template_sync.utils.logging import get_logger

logger = get_logger(__name__)


def read_text_file(path: str | Path) -> str:
    """Read a UTF-8 text file.

    Raises:
        FileReadError: If the file is missing or unreadable.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise FileReadError(str(path), exc.strerror or str(exc)) from exc


def minify_html_body(html: str) -> str:
    """Collapse whitespace and minify inline CSS and JS.

    Markup is otherwise left intact: optional closing tags, the
    ``<html>``/``<head>`` tags and comments (Outlook ``<!--[if mso]>``
    blocks) are kept, and ``{{ }}`` template placeholders pass through
    untouched.
    """
    return minify_html.minify(
        html,
        minify_css=True,
        minify_js=True,
        keep_closing_tags=True,
        keep_html_and_head_opening_tags=True,
        keep_comments=True,
        preserve_brace_template_syntax=True,
    )


def build_template_spec(config: SyncConfig) -> TemplateSpec:
    """Assemble the desired template from the configured files."""
    subject = read_text_file(config.subject_file_path)
    text_body = read_text_file(config.raw_body_file_path)
    raw_html = read_text_file(config.html_body_file_path)
    html_body = minify_html_body(raw_html)

    logger.info(
        "Loaded template sources",
        extra={
            "template_name": config.template_name,
            "html_length": len(raw_html),
            "html_minified_length": len(html_body),
        },
    )
    return TemplateSpec(
        name=config.template_name,
        subject_part=subject,
        text_part=text_body,
        html_part=html_body,
    )
