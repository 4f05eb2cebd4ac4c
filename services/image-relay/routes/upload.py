"""Image upload endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Header, HTTPException, UploadFile
from relay_common.logging import setup_logging

from dependencies import get_credential_store, get_upload_relay
from domain import CredentialStore, ImageUpload, UploadRelay
from exceptions import (
    CookieNotConfiguredError,
    FileValidationError,
    UpstreamError,
    UpstreamRejectedError,
)
from response_models import UploadResponse

logger = setup_logging()

router = APIRouter(tags=["upload"])

CredentialStoreDep = Annotated[CredentialStore, Depends(get_credential_store)]
UploadRelayDep = Annotated[UploadRelay, Depends(get_upload_relay)]


def _to_image_upload(file: UploadFile) -> ImageUpload:
    data = file.file.read()
    return ImageUpload(
        filename=file.filename or "",
        content_type=file.content_type,
        size=file.size if file.size is not None else len(data),
        data=data,
    )


@router.post("/upload", response_model=UploadResponse)
def upload_image(
    credentials: CredentialStoreDep,
    relay: UploadRelayDep,
    content_type: Annotated[str | None, Header()] = None,
    file: Annotated[UploadFile | None, File()] = None,
) -> UploadResponse:
    """
    Forwards an image to the image host and returns its data payload.

    The payload is returned under `url` exactly as the host sent it.
    """
    if "multipart/form-data" not in (content_type or ""):
        raise HTTPException(status_code=400, detail="Invalid content type")

    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    upload = _to_image_upload(file)

    try:
        relay.validate(upload)
    except FileValidationError as e:
        logger.warning(
            "Upload rejected",
            extra={
                "file_name": upload.filename,
                "content_type": upload.content_type,
                "size": upload.size,
                "reason": str(e),
            },
        )
        raise HTTPException(status_code=400, detail=str(e))

    try:
        cookie = credentials.get_cookie()
    except CookieNotConfiguredError as e:
        raise HTTPException(status_code=401, detail=str(e))

    try:
        data = relay.relay(upload, cookie)
    except (UpstreamError, UpstreamRejectedError) as e:
        raise HTTPException(status_code=500, detail=str(e))

    return UploadResponse(url=data)
