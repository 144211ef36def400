"""Error taxonomy for webhook operations.

Every failure of a message operation is one of three kinds and is returned
as a value, never raised across the tool boundary.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Union

from pydantic import ValidationError as PydanticValidationError


@dataclass(frozen=True)
class WebhookHTTPError:
    """The webhook answered with a non-2xx status."""

    type: ClassVar[str] = "webhook_error"

    status: int
    status_text: str
    body: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "status": self.status,
            "statusText": self.status_text,
            "body": self.body,
        }


@dataclass(frozen=True)
class ValidationFailure:
    """Input was rejected locally, before any request was made."""

    type: ClassVar[str] = "validation_error"

    field: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "field": self.field, "message": self.message}


@dataclass(frozen=True)
class UnknownFailure:
    """Anything outside the HTTP exchange: bad URL, network, bad JSON."""

    type: ClassVar[str] = "unknown_error"

    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "message": self.message}


DiscordWebhookError = Union[WebhookHTTPError, ValidationFailure, UnknownFailure]


class InvalidParams(Exception):
    """Raised by the schema layer; carries the ValidationFailure to return."""

    def __init__(self, failure: ValidationFailure):
        super().__init__(f"{failure.field}: {failure.message}")
        self.failure = failure


def _loc_to_path(loc) -> str:
    return ".".join(str(part) for part in loc) or "(root)"


def failure_from_pydantic(exc: PydanticValidationError) -> ValidationFailure:
    """Collapse a pydantic ValidationError into one ValidationFailure.

    ``field`` names the first offending path; ``message`` lists all of them.
    """
    errors = exc.errors(include_url=False)
    if not errors:
        return ValidationFailure(field="(root)", message=str(exc))
    first = _loc_to_path(errors[0]["loc"])
    details = [f"{_loc_to_path(err['loc'])}: {err['msg']}" for err in errors]
    return ValidationFailure(field=first, message="; ".join(details))


def format_error(error: DiscordWebhookError) -> str:
    """Render an error as a human-readable message."""
    if isinstance(error, WebhookHTTPError):
        return f"Discord Webhook error: {error.status} {error.status_text}\n{error.body}"
    if isinstance(error, ValidationFailure):
        return f"Validation error: {error.field} - {error.message}"
    return f"Unknown error: {error.message}"
