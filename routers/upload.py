from fastapi import APIRouter, UploadFile, File
from fastapi.responses import FileResponse
from typing import List, Optional
import logging

from core.response import success_response, ErrorResponse, ERROR_RESPONSES
from services.image_storage import (
    save_uploads,
    format_megabytes,
    resolve_image_path,
    delete_image_file
)
from schemas.upload import UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/upload", response_model=UploadResponse, responses={413: {"model": ErrorResponse, "description": "File too large"}})
def upload_images(file: Optional[List[UploadFile]] = File(None, description="Up to 10 image files")):
    """Store uploaded images under generated names; a body without files stores nothing"""
    names, total_bytes = save_uploads(file or [])
    logger.info(f"Uploaded {len(names)} images ({total_bytes} bytes)")

    return UploadResponse(
        total_uploaded_size=format_megabytes(total_bytes),
        uploaded_file_names=names
    )

@router.get("/images/{imagename}", responses=ERROR_RESPONSES)
def serve_image(imagename: str):
    """Serve a stored image"""
    file_path = resolve_image_path(imagename)

    return FileResponse(
        path=file_path,
        media_type="image/jpeg",
        filename=imagename,
        content_disposition_type="inline"
    )

@router.delete("/images/{imagename}", responses=ERROR_RESPONSES)
def delete_image(imagename: str):
    """Delete a stored image file"""
    delete_image_file(imagename)
    return success_response(message="Image deleted successfully")
