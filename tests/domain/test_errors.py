"""Tests for the error taxonomy and its formatting."""

from discord_webhook.domain.errors import (
    UnknownFailure,
    ValidationFailure,
    WebhookHTTPError,
    format_error,
)


class TestFormatError:
    def test_webhook_error(self):
        err = WebhookHTTPError(status=404, status_text="Not Found", body="Unknown Message")
        assert format_error(err) == "Discord Webhook error: 404 Not Found\nUnknown Message"

    def test_validation_error(self):
        err = ValidationFailure(field="content/embeds", message="missing")
        assert format_error(err) == "Validation error: content/embeds - missing"

    def test_unknown_error(self):
        assert format_error(UnknownFailure(message="boom")) == "Unknown error: boom"


class TestToDict:
    def test_webhook_error_keeps_body_verbatim(self):
        body = '{"message": "You are being rate limited.", "retry_after": 1.5, "global": false}'
        err = WebhookHTTPError(status=429, status_text="Too Many Requests", body=body)
        assert err.to_dict() == {
            "type": "webhook_error",
            "status": 429,
            "statusText": "Too Many Requests",
            "body": body,
        }

    def test_validation_error(self):
        assert ValidationFailure(field="f", message="m").to_dict() == {
            "type": "validation_error",
            "field": "f",
            "message": "m",
        }

    def test_unknown_error(self):
        assert UnknownFailure(message="m").to_dict() == {"type": "unknown_error", "message": "m"}
