from typing import Annotated
import logging
import secrets

from fastapi import Depends, Header, HTTPException, status

from ..core.errors import ConfigurationError
from ..core.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"


class ApiKeyGuard:
    """
    Checks the shared secret sent in the x-api-key header.

    The expected key is injected, so the guard can be exercised with any
    configuration. A missing expected key is a server fault, not a client one.
    """

    def __init__(self, expected_key: str | None):
        self.expected_key = expected_key

    def check(self, provided_key: str | None) -> None:
        if not self.expected_key:
            logger.error("TOKENS_API_KEY is not set")
            raise ConfigurationError("Server misconfiguration: missing API key")

        if not provided_key or not secrets.compare_digest(
            provided_key.encode("utf-8"), self.expected_key.encode("utf-8")
        ):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Unauthorized",
            )


async def require_api_key(
    x_api_key: Annotated[str | None, Header(alias=API_KEY_HEADER)] = None,
    settings: Settings = Depends(get_settings),
) -> None:
    ApiKeyGuard(settings.TOKENS_API_KEY).check(x_api_key)
