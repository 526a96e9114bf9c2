from datetime import datetime
from typing import Callable
import logging

from ..models.Token import CreateTokenInput, PendingToken, Token, TokenResponse
from .store import TokenStore
from .utils import as_utc, calculate_expires_at, format_timestamp, generate_token_value, utc_now

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def create_token(
    store: TokenStore,
    data: CreateTokenInput,
    clock: Clock | None = None,
    token_factory: Callable[[], str] | None = None,
) -> TokenResponse:
    """
    Mints a new token for `data.user_id` and persists it.
    Every call inserts a new record; storage errors propagate to the caller.
    """
    now = (clock or utc_now)()
    expires_at = calculate_expires_at(now, data.expires_in_minutes)

    pending = PendingToken(
        user_id=data.user_id,
        scopes=list(data.scopes),
        token=(token_factory or generate_token_value)(),
        created_at=now,
        expires_at=expires_at,
    )
    stored = store.insert(pending)

    logger.info(
        "Issued token %s for user %s (scopes=%s, expires_at=%s)",
        stored.id, stored.user_id, ",".join(stored.scopes), format_timestamp(stored.expires_at),
    )
    return to_public(stored)


def get_active_tokens(store: TokenStore, user_id: str, clock: Clock | None = None) -> list[TokenResponse]:
    """
    Tokens of `user_id` whose expiry is strictly after now, most recently created first.
    """
    now = (clock or utc_now)()
    records = [r for r in store.query(user_id, now) if as_utc(r.expires_at) > now]
    records.sort(key=lambda r: as_utc(r.created_at), reverse=True)
    return [to_public(r) for r in records]


def to_public(record: Token) -> TokenResponse:
    return TokenResponse(
        id=record.id,
        user_id=record.user_id,
        scopes=list(record.scopes),
        token=record.token,
        created_at=format_timestamp(record.created_at),
        expires_at=format_timestamp(record.expires_at),
    )
