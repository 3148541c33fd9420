"""Configuration providers for the template sync run.

Values arrive either as GitHub Actions inputs (``INPUT_<NAME>``
environment variables) or from a fixed mapping used for local runs and
tests. The rest of the tool only sees the resulting ``SyncConfig``.
"""

from __future__ import annotations

import os
from abc import ABC
from abc import abstractmethod
from typing import Mapping
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from template_sync.exceptions import ConfigurationError

TEMPLATE_NAME = "templateName"
SUBJECT_FILE_PATH = "subjectFilePath"
HTML_BODY_FILE_PATH = "htmlBodyFilePath"
RAW_BODY_FILE_PATH = "rawBodyFilePath"
SES_REGION = "sesRegion"
AWS_ACCESS_KEY = "awsAccessKey"
AWS_SECRET_KEY = "awsSecretKey"
AWS_SESSION_TOKEN = "awsSessionToken"

REQUIRED_KEYS = (
    TEMPLATE_NAME,
    SUBJECT_FILE_PATH,
    HTML_BODY_FILE_PATH,
    RAW_BODY_FILE_PATH,
    SES_REGION,
)
CREDENTIAL_KEYS = (AWS_ACCESS_KEY, AWS_SECRET_KEY)

# Values used by ``template-sync --local``.
LOCAL_DEFAULTS: dict[str, str] = {
    TEMPLATE_NAME: "UserAccountDeleted",
    SUBJECT_FILE_PATH: "ses/templates/UserAccountDeleted/subject.txt",
    HTML_BODY_FILE_PATH: "ses/templates/UserAccountDeleted/email.html",
    RAW_BODY_FILE_PATH: "ses/templates/UserAccountDeleted/email.txt",
    SES_REGION: "us-east-1",
}


class AwsCredentials(BaseModel):
    """Explicit AWS credentials for the SES client."""

    model_config = ConfigDict(frozen=True)

    access_key_id: str = Field(repr=False)
    secret_access_key: str = Field(repr=False)
    session_token: Optional[str] = Field(default=None, repr=False)


class SyncConfig(BaseModel):
    """Validated settings for one sync run."""

    model_config = ConfigDict(frozen=True)

    template_name: str
    subject_file_path: str
    html_body_file_path: str
    raw_body_file_path: str
    ses_region: str
    credentials: Optional[AwsCredentials] = None


class ConfigProvider(ABC):
    """Source of raw configuration strings."""

    #: Whether explicit AWS credentials must be supplied by this source.
    requires_credentials: bool = False

    @abstractmethod
    def get_optional(self, key: str) -> Optional[str]:
        """Return the value for ``key`` or None when missing or blank."""

    def get(self, key: str) -> str:
        """Return the value for ``key``.

        Raises:
            ConfigurationError: If the value is missing or blank.
        """
        value = self.get_optional(key)
        if value is None:
            raise ConfigurationError(key)
        return value


class ActionInputsProvider(ConfigProvider):
    """Read GitHub Actions inputs from the process environment."""

    requires_credentials = True

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ

    @staticmethod
    def env_name(key: str) -> str:
        """Return the variable name the Actions runner uses for ``key``."""
        return f"INPUT_{key.replace(' ', '_').upper()}"

    def get_optional(self, key: str) -> Optional[str]:
        value = self._environ.get(self.env_name(key), "").strip()
        return value or None


class StaticConfigProvider(ConfigProvider):
    """Serve values from a fixed mapping."""

    def __init__(self, values: Mapping[str, str]):
        self._values = dict(values)

    def get_optional(self, key: str) -> Optional[str]:
        value = (self._values.get(key) or "").strip()
        return value or None


def _load_credentials(provider: ConfigProvider) -> Optional[AwsCredentials]:
    if provider.requires_credentials:
        access_key, secret_key = (provider.get(key) for key in CREDENTIAL_KEYS)
    else:
        access_key = provider.get_optional(AWS_ACCESS_KEY)
        secret_key = provider.get_optional(AWS_SECRET_KEY)
        if access_key is None and secret_key is None:
            return None
        # A half-configured pair is still an error.
        access_key = provider.get(AWS_ACCESS_KEY)
        secret_key = provider.get(AWS_SECRET_KEY)
    return AwsCredentials(
        access_key_id=access_key,
        secret_access_key=secret_key,
        session_token=provider.get_optional(AWS_SESSION_TOKEN),
    )


def load_config(provider: ConfigProvider) -> SyncConfig:
    """Read and validate every setting before any other work happens.

    Raises:
        ConfigurationError: Naming the first missing or blank key.
    """
    values = {key: provider.get(key) for key in REQUIRED_KEYS}
    return SyncConfig(
        template_name=values[TEMPLATE_NAME],
        subject_file_path=values[SUBJECT_FILE_PATH],
        html_body_file_path=values[HTML_BODY_FILE_PATH],
        raw_body_file_path=values[RAW_BODY_FILE_PATH],
        ses_region=values[SES_REGION],
        credentials=_load_credentials(provider),
    )
