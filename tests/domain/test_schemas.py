"""Tests for parameter schemas."""

import pytest

from discord_webhook.domain.errors import InvalidParams
from discord_webhook.domain.schemas import (
    parse_delete_params,
    parse_edit_params,
    parse_send_params,
)


def _failure(raw, parser=parse_send_params):
    with pytest.raises(InvalidParams) as exc:
        parser(raw)
    return exc.value.failure


class TestSendParams:
    def test_minimal(self):
        p = parse_send_params({"content": "hi"})
        assert p.content == "hi"
        assert p.tts is False
        assert p.embeds is None

    def test_content_too_long(self):
        failure = _failure({"content": "a" * 2001})
        assert failure.field == "content"

    def test_content_at_limit(self):
        assert parse_send_params({"content": "a" * 2000}).content == "a" * 2000

    def test_empty_content_rejected(self):
        assert _failure({"content": ""}).field == "content"

    def test_unknown_field_rejected(self):
        failure = _failure({"content": "hi", "file": "x.png"})
        assert failure.field == "file"
        assert failure.type == "validation_error"

    def test_username_limit(self):
        assert _failure({"content": "hi", "username": "u" * 81}).field == "username"

    def test_thread_name_limit(self):
        assert _failure({"content": "hi", "thread_name": "t" * 101}).field == "thread_name"

    def test_avatar_url_must_be_absolute(self):
        assert _failure({"content": "hi", "avatar_url": "not a url"}).field == "avatar_url"

    def test_avatar_url_kept_verbatim(self):
        p = parse_send_params({"content": "hi", "avatar_url": "https://example.com"})
        assert p.avatar_url == "https://example.com"

    def test_too_many_embeds(self):
        failure = _failure({"embeds": [{"title": str(i)} for i in range(11)]})
        assert failure.field == "embeds"

    def test_ten_embeds_ok(self):
        p = parse_send_params({"embeds": [{"title": str(i)} for i in range(10)]})
        assert len(p.embeds) == 10


class TestEmbedSchema:
    def test_too_many_fields(self):
        fields = [{"name": "n", "value": "v"} for _ in range(26)]
        failure = _failure({"embeds": [{"fields": fields}]})
        assert failure.field == "embeds.0.fields"

    def test_field_inline_default(self):
        p = parse_send_params({"embeds": [{"fields": [{"name": "n", "value": "v"}]}]})
        assert p.embeds[0].fields[0].inline is False

    @pytest.mark.parametrize("color", [-1, 16777216])
    def test_color_out_of_range(self, color):
        assert _failure({"embeds": [{"color": color}]}).field == "embeds.0.color"

    @pytest.mark.parametrize("color", [0, 0x00FF00, 16777215])
    def test_color_in_range(self, color):
        assert parse_send_params({"embeds": [{"color": color}]}).embeds[0].color == color

    def test_color_must_be_integer(self):
        assert _failure({"embeds": [{"color": 1.5}]}).field == "embeds.0.color"

    def test_title_limit(self):
        assert _failure({"embeds": [{"title": "t" * 257}]}).field == "embeds.0.title"

    def test_description_limit(self):
        failure = _failure({"embeds": [{"description": "d" * 4097}]})
        assert failure.field == "embeds.0.description"

    def test_footer_limit(self):
        failure = _failure({"embeds": [{"footer": {"text": "f" * 2049}}]})
        assert failure.field == "embeds.0.footer.text"

    def test_author_limit(self):
        failure = _failure({"embeds": [{"author": {"name": "a" * 257}}]})
        assert failure.field == "embeds.0.author.name"

    def test_nested_unknown_field(self):
        failure = _failure({"embeds": [{"image": {"url": "https://x.test/a.png", "width": 10}}]})
        assert failure.field == "embeds.0.image.width"

    def test_image_url_checked(self):
        failure = _failure({"embeds": [{"thumbnail": {"url": "/relative.png"}}]})
        assert failure.field == "embeds.0.thumbnail.url"

    def test_timestamp_unchecked(self):
        p = parse_send_params({"embeds": [{"timestamp": "yesterday"}]})
        assert p.embeds[0].timestamp == "yesterday"

    def test_all_errors_listed(self):
        failure = _failure({"embeds": [{"title": "t" * 257, "color": -5}]})
        assert failure.field == "embeds.0.title"
        assert "embeds.0.color" in failure.message


class TestAllowedMentions:
    def test_parse_closed_set(self):
        failure = _failure({"content": "hi", "allowed_mentions": {"parse": ["channels"]}})
        assert failure.field.startswith("allowed_mentions.parse")

    def test_replied_user_default(self):
        p = parse_send_params({"content": "hi", "allowed_mentions": {"parse": ["users"]}})
        assert p.allowed_mentions.replied_user is False


class TestEditAndDeleteParams:
    def test_edit_requires_message_id(self):
        assert _failure({"content": "hi"}, parse_edit_params).field == "message_id"

    def test_edit_rejects_create_only_fields(self):
        failure = _failure({"message_id": "1", "content": "hi", "username": "x"}, parse_edit_params)
        assert failure.field == "username"

    def test_delete_requires_non_empty_id(self):
        assert _failure({"message_id": ""}, parse_delete_params).field == "message_id"

    def test_delete_ok(self):
        assert parse_delete_params({"message_id": "42"}).message_id == "42"


class TestStrictBooleans:
    def test_tts_string_rejected(self):
        assert _failure({"content": "hi", "tts": "yes"}).field == "tts"

    def test_tts_int_rejected(self):
        assert _failure({"content": "hi", "tts": 1}).field == "tts"

    def test_inline_string_rejected(self):
        failure = _failure({"embeds": [{"fields": [{"name": "n", "value": "v", "inline": "true"}]}]})
        assert failure.field == "embeds.0.fields.0.inline"

    def test_replied_user_string_rejected(self):
        failure = _failure({"content": "hi", "allowed_mentions": {"replied_user": "no"}})
        assert failure.field == "allowed_mentions.replied_user"

    def test_real_booleans_accepted(self):
        p = parse_send_params({"content": "hi", "tts": True, "allowed_mentions": {"replied_user": True}})
        assert p.tts is True
        assert p.allowed_mentions.replied_user is True
