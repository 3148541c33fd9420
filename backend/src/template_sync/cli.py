"""Command-line entry point: sync one SES template from local files.

Runs as a single CI step. Configuration is validated before any file or
network access, then the template is created or updated and the stored
state is logged. Any error fails the run.
"""

from __future__ import annotations

import argparse
from typing import Optional
from typing import Sequence

from template_sync.config import LOCAL_DEFAULTS
from template_sync.config import ActionInputsProvider
from template_sync.config import ConfigProvider
from template_sync.config import StaticConfigProvider
from template_sync.config import load_config
from template_sync.services.aws_clients import get_ses_client
from template_sync.services.reconciler import ReconcileResult
from template_sync.services.reconciler import reconcile
from template_sync.services.sources import build_template_spec
from template_sync.services.template_store import SesTemplateStore
from template_sync.utils.actions import set_failed
from template_sync.utils.logging import configure_logging
from template_sync.utils.logging import get_logger
from template_sync.utils.logging import set_run_context

logger = get_logger(__name__)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="template-sync",
        description="Create or update an Amazon SES email template from local files.",
    )
    parser.add_argument(
        "--local",
        action="store_true",
        help="Use the built-in local values instead of GitHub Actions inputs.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (defaults to LOG_LEVEL or INFO).",
    )
    return parser.parse_args(argv)


def run(provider: ConfigProvider) -> ReconcileResult:
    """Load config and sources, then reconcile the template."""
    config = load_config(provider)
    spec = build_template_spec(config)
    client = get_ses_client(config.ses_region, credentials=config.credentials)
    store = SesTemplateStore(client)
    result = reconcile(spec, store)
    logger.info(
        f"Template {spec.name} {result.action}",
        extra={
            "template_name": spec.name,
            "action": result.action,
            "in_sync": result.after.matches(spec),
        },
    )
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sync and return the process exit code."""
    args = _parse_args(argv)
    configure_logging(args.log_level)
    set_run_context()

    provider: ConfigProvider
    if args.local:
        provider = StaticConfigProvider(LOCAL_DEFAULTS)
    else:
        provider = ActionInputsProvider()

    try:
        run(provider)
    except Exception as exc:
        error_type = type(exc).__name__
        logger.error(
            "Template sync failed",
            extra={"error_type": error_type, "error_message": str(exc)},
            exc_info=True,
        )
        set_failed(str(exc))
        return 1
    return 0
