"""Template store interface and its Amazon SES implementation.

The store does not offer a "does this name exist" probe: ``GetTemplate``
fails for an unknown name, and that failure cannot be told apart from a
transient fetch error. Existence is therefore always answered from the
full listing through ``TemplateStore.exists``.
"""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import Any
from typing import Callable
from typing import TypeVar

from botocore.exceptions import BotoCoreError
from botocore.exceptions import ClientError

from template_sync.exceptions import AlreadyExistsError
from template_sync.exceptions import NotFoundError
from template_sync.exceptions import StoreError
from template_sync.models import TemplateContent
from template_sync.models import TemplateMetadata
from template_sync.models import TemplateSpec
from template_sync.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

_RESOURCE = "Template"


class TemplateStore(ABC):
    """Remote store of named email templates."""

    @abstractmethod
    def list_templates(self) -> list[TemplateMetadata]:
        """Return metadata for every template in the store."""

    @abstractmethod
    def get_template(self, name: str) -> TemplateContent:
        """Return the stored content for ``name``.

        Raises:
            NotFoundError: If no template has that name.
        """

    @abstractmethod
    def create_template(self, spec: TemplateSpec) -> None:
        """Create a new template.

        Raises:
            AlreadyExistsError: If the name is already taken.
        """

    @abstractmethod
    def update_template(self, spec: TemplateSpec) -> None:
        """Replace subject, text and HTML of an existing template.

        Raises:
            NotFoundError: If the name no longer exists.
        """

    def exists(self, name: str) -> bool:
        """Return True when the listing contains a template named ``name``."""
        return any(item.name == name for item in self.list_templates())


class SesTemplateStore(TemplateStore):
    """Template store backed by the Amazon SES v1 template API."""

    def __init__(self, client: Any):
        self._client = client

    def _call(self, operation: str, name: str | None, func: Callable[[], T]) -> T:
        try:
            return func()
        except ClientError as exc:
            error = exc.response.get("Error", {})
            code = error.get("Code", "")
            message = error.get("Message") or str(exc)
            if code == "TemplateDoesNotExist" and name is not None:
                raise NotFoundError(_RESOURCE, name) from exc
            if code == "AlreadyExists" and name is not None:
                raise AlreadyExistsError(_RESOURCE, name) from exc
            raise StoreError(
                f"SES {operation} failed: {message}",
                detail=f"Code: {code}" if code else None,
                code=code or None,
            ) from exc
        except BotoCoreError as exc:
            raise StoreError(f"SES {operation} failed: {exc}") from exc

    def list_templates(self) -> list[TemplateMetadata]:
        templates: list[TemplateMetadata] = []
        next_token: str | None = None
        while True:
            kwargs: dict[str, Any] = {}
            if next_token:
                kwargs["NextToken"] = next_token
            response = self._call(
                "ListTemplates",
                None,
                lambda: self._client.list_templates(**kwargs),
            )
            for item in response.get("TemplatesMetadata", []):
                templates.append(TemplateMetadata.from_ses(item))
            next_token = response.get("NextToken")
            if not next_token:
                break
        logger.debug(
            "Listed SES templates",
            extra={"template_count": len(templates)},
        )
        return templates

    def get_template(self, name: str) -> TemplateContent:
        response = self._call(
            "GetTemplate",
            name,
            lambda: self._client.get_template(TemplateName=name),
        )
        payload = response.get("Template")
        if not payload:
            raise StoreError(f"SES GetTemplate returned no template for {name}")
        return TemplateContent.from_ses(payload)

    def create_template(self, spec: TemplateSpec) -> None:
        self._call(
            "CreateTemplate",
            spec.name,
            lambda: self._client.create_template(Template=spec.to_ses()),
        )

    def update_template(self, spec: TemplateSpec) -> None:
        self._call(
            "UpdateTemplate",
            spec.name,
            lambda: self._client.update_template(Template=spec.to_ses()),
        )
