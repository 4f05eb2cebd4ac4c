"""Session cookie management endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Form, HTTPException
from relay_common import KeyValueStoreError
from relay_common.logging import setup_logging

from dependencies import get_credential_store
from domain import CredentialsOutcome, CredentialStore
from exceptions import InvalidPasswordError
from response_models import MessageResponse

logger = setup_logging()

router = APIRouter(tags=["credentials"])

CredentialStoreDep = Annotated[CredentialStore, Depends(get_credential_store)]

_OUTCOME_MESSAGES = {
    CredentialsOutcome.CREATED: "Password set, cookie saved",
    CredentialsOutcome.UPDATED: "Cookie updated",
}


@router.post("/set_cookie", response_model=MessageResponse)
def set_cookie(
    credentials: CredentialStoreDep,
    password: Annotated[str | None, Form()] = None,
    cookie: Annotated[str | None, Form()] = None,
) -> MessageResponse:
    """Sets the admin password on first use, then updates the session cookie."""
    if not password or not cookie:
        raise HTTPException(status_code=400, detail="Password and cookie are required")

    try:
        outcome = credentials.set_credentials(password, cookie)
    except InvalidPasswordError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except KeyValueStoreError:
        raise HTTPException(status_code=500, detail="Server error")

    return MessageResponse(message=_OUTCOME_MESSAGES[outcome])
