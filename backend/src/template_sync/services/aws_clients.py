"""boto3 client factory for the one-shot sync run."""

from __future__ import annotations

from typing import Any
from typing import Optional

import boto3
import botocore.config

from template_sync.config import AwsCredentials


def _client_config() -> botocore.config.Config:
    # Timeouts and retries stay at botocore defaults; only the agent is tagged.
    return botocore.config.Config(user_agent_extra="template-sync")


def get_client(
    service: str,
    region_name: str | None = None,
    credentials: Optional[AwsCredentials] = None,
) -> Any:
    """Return a new boto3 client for the given service.

    Without explicit credentials the boto3 default credential chain
    (environment, shared config, instance role) is used.
    """
    kwargs: dict[str, Any] = {"region_name": region_name, "config": _client_config()}
    if credentials is not None:
        kwargs["aws_access_key_id"] = credentials.access_key_id
        kwargs["aws_secret_access_key"] = credentials.secret_access_key
        if credentials.session_token:
            kwargs["aws_session_token"] = credentials.session_token
    return boto3.client(service, **kwargs)  # type: ignore[call-overload]


def get_ses_client(
    region_name: str | None = None,
    credentials: Optional[AwsCredentials] = None,
) -> Any:
    return get_client("ses", region_name=region_name, credentials=credentials)
