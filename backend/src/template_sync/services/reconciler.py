"""Create-or-update of a single template in the remote store.

The decision is made on name existence in the store listing only; the
existing content is never compared with the desired one. There is no
locking between the listing and the write, so concurrent runs against
the same template name are unsupported: last writer wins, and a create
racing another create fails with ``AlreadyExistsError``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional

from template_sync.models import TemplateContent
from template_sync.models import TemplateSpec
from template_sync.services.template_store import TemplateStore
from template_sync.utils.logging import ContextLogger
from template_sync.utils.logging import get_logger

ACTION_CREATED = "created"
ACTION_UPDATED = "updated"


@dataclass(frozen=True)
class ReconcileResult:
    """Outcome of one reconcile call."""

    action: str
    before: Optional[TemplateContent]
    after: TemplateContent


def _log_template(logger: ContextLogger, label: str, content: TemplateContent) -> None:
    rendered = content.to_log_dict()
    logger.info(
        f"Template on AWS SES {label}: {json.dumps(rendered, ensure_ascii=False)}",
        extra={"template": rendered},
    )


def reconcile(
    spec: TemplateSpec,
    store: TemplateStore,
    logger: Optional[ContextLogger] = None,
) -> ReconcileResult:
    """Make the store's template named ``spec.name`` equal ``spec``.

    Makes at most four store calls: list, get (only when updating),
    create or update, and a final get. Any store error propagates
    immediately; nothing is retried or rolled back.

    Args:
        spec: Desired template content.
        store: Store handle to reconcile against.
        logger: Logger for the before/after lines. Defaults to this
            module's logger.

    Returns:
        The action taken plus the stored content before and after.
    """
    log = logger or get_logger(__name__, template_name=spec.name)

    before: Optional[TemplateContent] = None
    if not store.exists(spec.name):
        log.debug("Template not found in listing, creating")
        store.create_template(spec)
        action = ACTION_CREATED
    else:
        before = store.get_template(spec.name)
        _log_template(log, "before updating", before)
        store.update_template(spec)
        action = ACTION_UPDATED

    after = store.get_template(spec.name)
    _log_template(log, "after updating", after)
    return ReconcileResult(action=action, before=before, after=after)
