"""Discord webhook limits.

Only the per-object bounds are enforced by the schemas. The aggregate embed
budget and the rate limit are caller responsibilities.
"""

MAX_CONTENT_LENGTH = 2000
MAX_USERNAME_LENGTH = 80
MAX_THREAD_NAME_LENGTH = 100

MAX_EMBEDS = 10
MAX_FIELDS = 25
MAX_EMBED_TITLE_LENGTH = 256
MAX_EMBED_DESCRIPTION_LENGTH = 4096
MAX_FOOTER_TEXT_LENGTH = 2048
MAX_AUTHOR_NAME_LENGTH = 256
MAX_COLOR = 0xFFFFFF

# Discord API: all embeds of one message together
MAX_EMBED_TOTAL_CHARS = 6000

# 30 messages / minute / channel
RATE_LIMIT_PER_MINUTE = 30
