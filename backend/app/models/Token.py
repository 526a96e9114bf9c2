from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field as PydanticField, StrictInt, StrictStr
from sqlalchemy import JSON, DateTime, Index
from sqlmodel import Field, SQLModel

# ==========================================
# SQLModel (Database Entity)
# ==========================================
class TokenBase(SQLModel):
    user_id: str = Field(index=True, nullable=False)
    scopes: list[str] = Field(sa_type=JSON, nullable=False)
    token: str = Field(unique=True, index=True, nullable=False)
    created_at: datetime = Field(sa_type=DateTime(timezone=True), nullable=False)
    expires_at: datetime = Field(sa_type=DateTime(timezone=True), nullable=False)


# Unsaved record handed to the store, which assigns the id
PendingToken = TokenBase


class Token(TokenBase, table=True):
    __tablename__ = "tokens"
    __table_args__ = (Index("ix_tokens_user_id_expires_at", "user_id", "expires_at"),)

    id: str | None = Field(default=None, primary_key=True)

# ==========================================
# Pydantic Models (DTOs)
# ==========================================

# Ten years; keeps expiry arithmetic inside the datetime range
MAX_EXPIRES_IN_MINUTES = 10 * 365 * 24 * 60

# Body of POST /api/tokens once validated
class CreateTokenInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: StrictStr = PydanticField(alias="userId", min_length=1)
    scopes: list[StrictStr] = PydanticField(min_length=1)
    expires_in_minutes: StrictInt = PydanticField(alias="expiresInMinutes", gt=0, le=MAX_EXPIRES_IN_MINUTES)

# Public representation returned by the API
class TokenResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str = PydanticField(alias="userId")
    scopes: list[str]
    token: str
    created_at: str = PydanticField(alias="createdAt")
    expires_at: str = PydanticField(alias="expiresAt")
