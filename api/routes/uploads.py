"""Image upload endpoint"""

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import JSONResponse
from typing import Optional

from app.exceptions import AppError
from services.upload_service import UploadService

router = APIRouter(tags=["Uploads"])


@router.post("/upload-profile-image")
def upload_profile_image(file: Optional[UploadFile] = File(default=None)):
    """Store one image sent as multipart field ``file``; returns its public URL."""
    if file is None or not file.filename:
        return JSONResponse(status_code=400, content={"error": "No file uploaded"})
    try:
        url = UploadService.store_image(file.filename, file.file.read())
    except AppError as e:
        return JSONResponse(status_code=e.http_status, content={"error": e.message})
    return {"url": url}
