from datetime import datetime
from typing import Protocol
import uuid

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from ..core.database import get_session
from ..core.errors import StorageError
from ..models.Token import PendingToken, Token
from .utils import as_utc


class TokenStore(Protocol):
    """
    Persistence for token records.

    `query` returns the user's records expiring strictly after `active_as_of`,
    newest `created_at` first. An empty list is a normal result.
    """

    def insert(self, pending: PendingToken) -> Token: ...
    def query(self, user_id: str, active_as_of: datetime) -> list[Token]: ...


def _new_id() -> str:
    return uuid.uuid4().hex


def _detached(record: Token) -> Token:
    return Token(
        id=record.id,
        user_id=record.user_id,
        scopes=list(record.scopes),
        token=record.token,
        created_at=as_utc(record.created_at),
        expires_at=as_utc(record.expires_at),
    )


class SQLTokenStore(TokenStore):
    def __init__(self, session: Session) -> None:
        self.session = session

    def insert(self, pending: PendingToken) -> Token:
        db_token = Token(id=_new_id(), **pending.model_dump())
        try:
            self.session.add(db_token)
            self.session.commit()
            self.session.refresh(db_token)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError("Failed to store token") from exc
        return _detached(db_token)

    def query(self, user_id: str, active_as_of: datetime) -> list[Token]:
        statement = (
            select(Token)
            .where(Token.user_id == user_id, Token.expires_at > active_as_of)
            .order_by(col(Token.created_at).desc())
        )
        try:
            rows = self.session.exec(statement).all()
        except SQLAlchemyError as exc:
            raise StorageError("Failed to query tokens") from exc
        return [_detached(row) for row in rows]


class InMemoryTokenStore(TokenStore):
    """List-backed store, used by tests and local experiments."""

    def __init__(self) -> None:
        self.records: list[Token] = []

    def insert(self, pending: PendingToken) -> Token:
        record = Token(id=_new_id(), **pending.model_dump())
        self.records.append(record)
        return _detached(record)

    def query(self, user_id: str, active_as_of: datetime) -> list[Token]:
        matches = [
            _detached(r) for r in self.records
            if r.user_id == user_id and as_utc(r.expires_at) > active_as_of
        ]
        return sorted(matches, key=lambda r: r.created_at, reverse=True)


def get_token_store(session: Session = Depends(get_session)) -> TokenStore:
    return SQLTokenStore(session)
