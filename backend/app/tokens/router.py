from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from ..auth.dependencies import require_api_key
from ..models.Token import TokenResponse
from .service import create_token, get_active_tokens
from .store import TokenStore, get_token_store
from .validation import ValidationResult, validate_create_token_input

router = APIRouter(
    prefix="/api/tokens",
    tags=["tokens"],
    dependencies=[Depends(require_api_key)],
)


def _invalid_body(result: ValidationResult) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request body", "errors": result.flatten()},
    )


@router.post("", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def issue_token(request: Request, store: TokenStore = Depends(get_token_store)):
    """
    Issue a new token for a user.
    """
    try:
        payload = await request.json()
    except ValueError:
        return _invalid_body(ValidationResult(form_errors=["Malformed JSON"]))

    result = validate_create_token_input(payload)
    if not result.ok:
        return _invalid_body(result)

    # Store calls block, so keep them off the event loop
    return await run_in_threadpool(create_token, store, result.value)


@router.get("", response_model=list[TokenResponse])
def list_active_tokens(
    user_id: Annotated[str | None, Query(alias="userId")] = None,
    store: TokenStore = Depends(get_token_store),
):
    """
    List the active (non-expired) tokens of a user, newest first.
    """
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="userId query parameter is required",
        )
    return get_active_tokens(store, user_id)
