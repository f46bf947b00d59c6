import io

import pytest
from fastapi import UploadFile
from fastapi.exceptions import RequestValidationError
from starlette.datastructures import Headers

from fixtures_data import PNG_BYTES
from schemas.floor import FloorCreate
from services.errors import BadRequest
from utils import uploads


def _upload(content, content_type="image/png", filename="photo.png"):
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


def test_read_upload_keeps_content_and_type():
    uploaded = uploads.read_upload(_upload(PNG_BYTES))

    assert uploaded.content == PNG_BYTES
    assert uploaded.content_type == "image/png"
    assert uploaded.filename == "photo.png"


def test_oversized_upload_is_rejected_without_reading_it_all(monkeypatch):
    monkeypatch.setattr(uploads, "MAX_UPLOAD_SIZE", 16)
    upload = _upload(b"\x00" * 1024)

    with pytest.raises(BadRequest) as exc:
        uploads.read_upload(upload)

    assert exc.value.message == "File size must be less than 5MB"
    assert upload.file.tell() == 17


def test_upload_at_the_size_limit_is_accepted(monkeypatch):
    monkeypatch.setattr(uploads, "MAX_UPLOAD_SIZE", len(PNG_BYTES))

    assert uploads.read_upload(_upload(PNG_BYTES)).content == PNG_BYTES


def test_unsupported_type_is_rejected():
    with pytest.raises(BadRequest):
        uploads.read_upload(_upload(b"plain text", content_type="text/plain", filename="notes.txt"))


def test_empty_optional_upload_is_ignored():
    assert uploads.read_optional_upload(None) is None
    assert uploads.read_optional_upload(_upload(b"", filename="")) is None


def test_parse_form_reports_validation_errors():
    with pytest.raises(RequestValidationError):
        uploads.parse_form(FloorCreate, tower_id=None, label="L1", number=1)
