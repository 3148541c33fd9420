"""Pytest configuration and fixtures for template sync tests.

This module provides shared fixtures, including an in-memory template
store that records every call, sample template specs and source files.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Generator
from typing import Optional

import pytest

# Add backend source to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from template_sync.exceptions import AlreadyExistsError  # noqa: E402
from template_sync.exceptions import NotFoundError  # noqa: E402
from template_sync.models import TemplateContent  # noqa: E402
from template_sync.models import TemplateMetadata  # noqa: E402
from template_sync.models import TemplateSpec  # noqa: E402
from template_sync.services.template_store import TemplateStore  # noqa: E402


class FakeTemplateStore(TemplateStore):
    """In-memory template store that records calls in order."""

    def __init__(self, templates: Optional[dict[str, TemplateContent]] = None):
        self.templates: dict[str, TemplateContent] = dict(templates or {})
        self.calls: list[tuple[str, str]] = []
        # Names created by another writer right after the next listing.
        self.race_names: set[str] = set()

    def call_names(self) -> list[str]:
        return [operation for operation, _ in self.calls]

    def list_templates(self) -> list[TemplateMetadata]:
        self.calls.append(('list_templates', ''))
        listing = [TemplateMetadata(name=name) for name in self.templates]
        for name in self.race_names:
            self.templates[name] = TemplateContent(name=name, subject_part='Racer')
        self.race_names = set()
        return listing

    def get_template(self, name: str) -> TemplateContent:
        self.calls.append(('get_template', name))
        if name not in self.templates:
            raise NotFoundError('Template', name)
        return self.templates[name]

    def create_template(self, spec: TemplateSpec) -> None:
        self.calls.append(('create_template', spec.name))
        if spec.name in self.templates:
            raise AlreadyExistsError('Template', spec.name)
        self.templates[spec.name] = _content_from_spec(spec)

    def update_template(self, spec: TemplateSpec) -> None:
        self.calls.append(('update_template', spec.name))
        if spec.name not in self.templates:
            raise NotFoundError('Template', spec.name)
        self.templates[spec.name] = _content_from_spec(spec)


def _content_from_spec(spec: TemplateSpec) -> TemplateContent:
    return TemplateContent(
        name=spec.name,
        subject_part=spec.subject_part,
        text_part=spec.text_part,
        html_part=spec.html_part,
    )


# --- Store Fixtures ---


@pytest.fixture
def fake_store() -> FakeTemplateStore:
    """Empty in-memory template store."""
    return FakeTemplateStore()


@pytest.fixture
def welcome_spec() -> TemplateSpec:
    """Sample desired template."""
    return TemplateSpec(
        name='Welcome',
        subject_part='Hi',
        text_part='Hello',
        html_part='<p>Hi</p>',
    )


@pytest.fixture
def old_welcome() -> TemplateContent:
    """Previously stored content of the sample template."""
    return TemplateContent(name='Welcome', subject_part='Old')


@pytest.fixture
def mock_boto3_client(mocker):
    """Mock boto3 client for AWS service calls."""
    mock = mocker.patch('boto3.client')
    return mock


# --- Source File Fixtures ---


@pytest.fixture
def template_files(tmp_path: Path) -> dict[str, str]:
    """Write a subject, text body and HTML body to disk."""
    subject = tmp_path / 'subject.txt'
    subject.write_text('Your account was deleted', encoding='utf-8')
    text = tmp_path / 'email.txt'
    text.write_text('Hello {{name}},\nyour account is gone.\n', encoding='utf-8')
    html = tmp_path / 'email.html'
    html.write_text(
        '<html>\n  <body>\n    <p>   Hello   {{name}}   </p>\n'
        '    <style> p { color : red ; } </style>\n  </body>\n</html>\n',
        encoding='utf-8',
    )
    return {
        'templateName': 'UserAccountDeleted',
        'subjectFilePath': str(subject),
        'rawBodyFilePath': str(text),
        'htmlBodyFilePath': str(html),
        'sesRegion': 'us-east-1',
    }


# --- Module State Fixtures ---


@pytest.fixture(autouse=True)
def _reset_module_state() -> Generator[None, None, None]:
    """Clear logging context and root handlers between tests."""
    from template_sync.utils.logging import clear_run_context

    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield

    clear_run_context()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
