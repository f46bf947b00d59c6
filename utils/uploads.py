# utils/uploads.py
"""
Conversion of multipart form data into plain values for the service layer.

Services never see FastAPI's UploadFile; they receive UploadedFile, which can
be built from any transport.
"""
from typing import List, Optional, Type, TypeVar

from fastapi import UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from azure_blob import UploadedFile
from config import ACCEPTED_IMAGE_TYPES, MAX_UPLOAD_SIZE
from services.errors import BadRequest

M = TypeVar("M", bound=BaseModel)


def parse_form(model_cls: Type[M], **fields) -> M:
     """
     Validate form fields into `model_cls`.

     Fields the client left out (None) are not passed, so model defaults
     apply. Validation failures surface as the usual 422 response.
     """
     values = {name: value for name, value in fields.items() if value is not None}
     try:
          return model_cls(**values)
     except ValidationError as exc:
          raise RequestValidationError(exc.errors(include_url=False, include_context=False))


def read_upload(upload: UploadFile) -> UploadedFile:
     """Read and validate one uploaded image (size and content type)."""
     content = upload.file.read(MAX_UPLOAD_SIZE + 1)
     if len(content) > MAX_UPLOAD_SIZE:
          raise BadRequest("File size must be less than 5MB")
     if upload.content_type not in ACCEPTED_IMAGE_TYPES:
          raise BadRequest("Unsupported file type. Only JPG, PNG, and WEBP are allowed.")
     return UploadedFile(
          filename=upload.filename or "upload",
          content=content,
          content_type=upload.content_type,
     )


def read_optional_upload(upload: Optional[UploadFile]) -> Optional[UploadedFile]:
     # Browsers send an empty part when no file is picked
     if upload is None or not upload.filename:
          return None
     return read_upload(upload)


def read_uploads(uploads: Optional[List[UploadFile]]) -> List[UploadedFile]:
     return [read_upload(upload) for upload in uploads or [] if upload.filename]
