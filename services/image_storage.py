"""
Stored image files on local disk.

Files are named by a generated token with a fixed ``.jpg`` extension and are
not linked to the ``productos_imagenes`` rows; callers keep the two in sync.
"""
import os
import uuid
import shutil
import logging
from pathlib import Path
from typing import List, Tuple

from fastapi import UploadFile

from core.config import settings
from core.exceptions import (
    BusinessLogicError,
    FilesystemError,
    PayloadTooLargeError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)

IMAGE_EXTENSION = ".jpg"
BYTES_PER_MB = 1024 * 1024


def images_dir() -> Path:
    return Path(settings.IMAGES_DIR)


def ensure_images_dir() -> Path:
    directory = images_dir()
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _file_size(file: UploadFile) -> int:
    if file.size is not None:
        return file.size
    file.file.seek(0, os.SEEK_END)
    size = file.file.tell()
    file.file.seek(0)
    return size


def validate_uploads(files: List[UploadFile]) -> None:
    """Check count and per-file size limits before anything touches the disk"""
    if len(files) > settings.MAX_UPLOAD_FILES:
        raise BusinessLogicError(
            f"Too many files. Maximum {settings.MAX_UPLOAD_FILES} files per upload",
            details={"received": len(files)}
        )

    for file in files:
        size = _file_size(file)
        if size > settings.MAX_FILE_SIZE:
            raise PayloadTooLargeError(
                f"File size too large. Maximum size allowed is {settings.MAX_FILE_SIZE // 1000000}MB",
                details={"filename": file.filename, "size": size}
            )


def generate_image_name() -> str:
    return f"{uuid.uuid4()}{IMAGE_EXTENSION}"


def save_uploads(files: List[UploadFile]) -> Tuple[List[str], int]:
    """Write each upload under a generated name.

    Returns the generated names and the total number of bytes written.
    Files written before a failure stay on disk.
    """
    validate_uploads(files)
    directory = ensure_images_dir()

    names = []
    total_bytes = 0
    for file in files:
        filename = generate_image_name()
        file_path = directory / filename
        try:
            file.file.seek(0)
            with open(file_path, "wb") as buffer:
                shutil.copyfileobj(file.file, buffer)
        except OSError as e:
            if file_path.exists():
                file_path.unlink()
            logger.error(f"Error saving upload {file.filename}: {str(e)}")
            raise FilesystemError("Failed to store uploaded image")

        names.append(filename)
        total_bytes += file_path.stat().st_size
        logger.info(f"Stored upload {file.filename} as {filename}")

    return names, total_bytes


def format_megabytes(total_bytes: int) -> str:
    return f"{total_bytes / BYTES_PER_MB:.2f} MB"


def resolve_image_path(image_name: str) -> Path:
    """Path of a stored image; names escaping the images directory are not found"""
    directory = images_dir().resolve()
    file_path = (directory / image_name).resolve()
    if file_path.parent != directory or not file_path.is_file():
        raise ResourceNotFoundError("Image", image_name)
    return file_path


def delete_image_file(image_name: str) -> None:
    directory = images_dir().resolve()
    file_path = (directory / image_name).resolve()
    if file_path.parent != directory:
        raise FilesystemError("Error deleting image", details={"image": image_name})

    try:
        os.remove(file_path)
    except OSError as e:
        logger.error(f"Error deleting image {image_name}: {str(e)}")
        raise FilesystemError("Error deleting image", details={"image": image_name})

    logger.info(f"Image deleted: {image_name}")
