# azure_blob.py
"""
Blob storage for uploaded files (floor plans, unit images, payment proofs).

Two backends share one interface:
- LocalBlobStore writes into UPLOAD_DIR, served by the app under /uploads
- AzureBlobStore writes into an Azure Storage container

Blob operations are never part of a database transaction.
"""
import logging
import mimetypes
import os
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import lru_cache

from azure.core.exceptions import ResourceNotFoundError
from azure.storage.blob import BlobServiceClient, ContentSettings

import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedFile:
     """Uploaded content as the service layer sees it, independent of transport."""
     filename: str
     content: bytes
     content_type: str


@dataclass(frozen=True)
class StoredBlob:
     reference: str
     mime_type: str
     size: int


def _new_blob_name(original_filename: str) -> str:
     """<UTC timestamp>-<uuid4><original extension>, unique per upload."""
     extension = os.path.splitext(original_filename or "")[1].lower()
     timestamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
     return f"{timestamp}-{uuid.uuid4()}{extension}"


def _guess_mime_type(filename: str) -> str:
     return mimetypes.guess_type(filename)[0] or "application/octet-stream"


class BlobStore:
     """Interface for storing and deleting uploaded binary content."""

     def store(self, content: bytes, original_filename: str) -> StoredBlob:
          raise NotImplementedError

     def delete(self, reference: str) -> None:
          """Remove a blob. Deleting a blob that is already gone is a no-op."""
          raise NotImplementedError

     def discard(self, reference: str) -> None:
          """Best-effort delete: failures are logged, never raised."""
          try:
               self.delete(reference)
          except Exception:
               logger.warning("Failed to delete blob %s", reference, exc_info=True)


class LocalBlobStore(BlobStore):
     def __init__(self, root: str, url_prefix: str = "/uploads"):
          self.root = root
          self.url_prefix = url_prefix.rstrip("/")
          os.makedirs(self.root, exist_ok=True)

     def _path_for(self, reference: str) -> str:
          # References are flat names under the prefix
          return os.path.join(self.root, os.path.basename(reference))

     def store(self, content: bytes, original_filename: str) -> StoredBlob:
          filename = _new_blob_name(original_filename)
          with open(os.path.join(self.root, filename), "wb") as buffer:
               buffer.write(content)
          return StoredBlob(
               reference=f"{self.url_prefix}/{filename}",
               mime_type=_guess_mime_type(original_filename),
               size=len(content),
          )

     def delete(self, reference: str) -> None:
          path = self._path_for(reference)
          if not os.path.exists(path):
               logger.warning("File not found, skipping deletion: %s", path)
               return
          os.remove(path)
          logger.info("File deleted: %s", path)


class AzureBlobStore(BlobStore):
     def __init__(self, account: str, key: str, container: str, service: BlobServiceClient = None):
          self.account = account
          self.container = container
          self.service = service or BlobServiceClient.from_connection_string(
               f"DefaultEndpointsProtocol=https;"
               f"AccountName={account};"
               f"AccountKey={key};"
               f"EndpointSuffix=core.windows.net"
          )

     def store(self, content: bytes, original_filename: str) -> StoredBlob:
          blob_name = _new_blob_name(original_filename)
          mime_type = _guess_mime_type(original_filename)
          blob_client = self.service.get_blob_client(container=self.container, blob=blob_name)
          blob_client.upload_blob(content, overwrite=True, content_settings=ContentSettings(content_type=mime_type))
          return StoredBlob(
               reference=f"https://{self.account}.blob.core.windows.net/{self.container}/{blob_name}",
               mime_type=mime_type,
               size=len(content),
          )

     def delete(self, reference: str) -> None:
          """
          Deletes a blob using its full URL
          """
          parts = reference.split("/")
          container = parts[-2]
          blob_name = parts[-1]
          blob_client = self.service.get_blob_client(container=container, blob=blob_name)
          try:
               blob_client.delete_blob()
          except ResourceNotFoundError:
               logger.warning("Blob not found, skipping deletion: %s", reference)


@lru_cache(maxsize=1)
def get_blob_store() -> BlobStore:
     """FastAPI dependency returning the configured blob store."""
     if config.BLOB_BACKEND == "azure":
          return AzureBlobStore(
               account=config.AZURE_STORAGE_ACCOUNT,
               key=config.AZURE_STORAGE_KEY,
               container=config.AZURE_STORAGE_CONTAINER,
          )
     return LocalBlobStore(config.UPLOAD_DIR)
