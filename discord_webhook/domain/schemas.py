"""Parameter schemas for the send / edit / delete operations.

Every model is closed (unknown keys are rejected) so a typo in a nested
embed object fails locally instead of being silently dropped by Discord.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Type, TypeVar

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
)

from discord_webhook.domain.errors import InvalidParams, failure_from_pydantic
from discord_webhook.domain.limits import (
    MAX_AUTHOR_NAME_LENGTH,
    MAX_COLOR,
    MAX_CONTENT_LENGTH,
    MAX_EMBED_DESCRIPTION_LENGTH,
    MAX_EMBED_TITLE_LENGTH,
    MAX_EMBEDS,
    MAX_FIELDS,
    MAX_FOOTER_TEXT_LENGTH,
    MAX_THREAD_NAME_LENGTH,
    MAX_USERNAME_LENGTH,
)

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _check_absolute_url(value: str) -> str:
    # validated with AnyUrl, forwarded unchanged (AnyUrl would normalise it)
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        raise ValueError("must be an absolute URL") from None
    return value


Url = Annotated[str, AfterValidator(_check_absolute_url)]


class _Closed(BaseModel):
    model_config = ConfigDict(extra="forbid")


class EmbedField(_Closed):
    name: str = Field(min_length=1)
    value: str = Field(min_length=1)
    inline: bool = Field(False, strict=True)


class EmbedFooter(_Closed):
    text: str = Field(min_length=1, max_length=MAX_FOOTER_TEXT_LENGTH)
    icon_url: Optional[Url] = None


class EmbedImage(_Closed):
    url: Url


class EmbedAuthor(_Closed):
    name: str = Field(min_length=1, max_length=MAX_AUTHOR_NAME_LENGTH)
    url: Optional[Url] = None
    icon_url: Optional[Url] = None


class Embed(_Closed):
    """Rich content block. ``timestamp`` is passed through as given (ISO 8601 expected)."""

    title: Optional[str] = Field(None, max_length=MAX_EMBED_TITLE_LENGTH)
    url: Optional[Url] = None
    description: Optional[str] = Field(None, max_length=MAX_EMBED_DESCRIPTION_LENGTH)
    timestamp: Optional[str] = None
    color: Optional[int] = Field(None, strict=True, ge=0, le=MAX_COLOR)
    footer: Optional[EmbedFooter] = None
    image: Optional[EmbedImage] = None
    thumbnail: Optional[EmbedImage] = None
    author: Optional[EmbedAuthor] = None
    fields: Optional[List[EmbedField]] = Field(None, max_length=MAX_FIELDS)


class AllowedMentions(_Closed):
    parse: Optional[List[Literal["roles", "users", "everyone"]]] = None
    roles: Optional[List[str]] = None
    users: Optional[List[str]] = None
    replied_user: bool = Field(False, strict=True)


class SendMessageParams(_Closed):
    content: Optional[str] = Field(
        None,
        min_length=1,
        max_length=MAX_CONTENT_LENGTH,
        description="Message text (1-2000 characters)",
    )
    username: Optional[str] = Field(
        None, max_length=MAX_USERNAME_LENGTH, description="Override the webhook display name"
    )
    avatar_url: Optional[Url] = Field(None, description="Override the webhook avatar")
    tts: bool = Field(False, strict=True, description="Send as a text-to-speech message")
    embeds: Optional[List[Embed]] = Field(None, max_length=MAX_EMBEDS, description="Up to 10 embeds")
    allowed_mentions: Optional[AllowedMentions] = None
    thread_id: Optional[str] = Field(
        None, description="Send into this thread (archived threads are unarchived)"
    )
    thread_name: Optional[str] = Field(
        None,
        max_length=MAX_THREAD_NAME_LENGTH,
        description="Create a thread with this name (forum/media channels only)",
    )


class EditMessageParams(_Closed):
    """Only content, embeds and allowed_mentions can change after sending."""

    message_id: str = Field(min_length=1, description="ID returned by send_message")
    content: Optional[str] = Field(None, min_length=1, max_length=MAX_CONTENT_LENGTH)
    embeds: Optional[List[Embed]] = Field(None, max_length=MAX_EMBEDS)
    allowed_mentions: Optional[AllowedMentions] = None


class DeleteMessageParams(_Closed):
    message_id: str = Field(min_length=1, description="ID returned by send_message")


ParamsT = TypeVar("ParamsT", bound=BaseModel)


def parse_params(model: Type[ParamsT], raw: Dict[str, Any]) -> ParamsT:
    """Validate raw tool arguments. Raises InvalidParams on any violation."""
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise InvalidParams(failure_from_pydantic(e)) from e


def parse_send_params(raw: Dict[str, Any]) -> SendMessageParams:
    return parse_params(SendMessageParams, raw)


def parse_edit_params(raw: Dict[str, Any]) -> EditMessageParams:
    return parse_params(EditMessageParams, raw)


def parse_delete_params(raw: Dict[str, Any]) -> DeleteMessageParams:
    return parse_params(DeleteMessageParams, raw)
