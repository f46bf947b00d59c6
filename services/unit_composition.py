# services/unit_composition.py
"""
Replace-on-update management of a unit's facilities and images.

Both helpers only write through the session they are given and never commit;
callers run them inside the transaction of the unit create/update.
"""
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from azure_blob import BlobStore, UploadedFile
from models import Facility, Unit, UnitFacility, UnitImage
from services.errors import BadRequest


def replace_facilities(db: Session, unit: Unit, facility_ids: Optional[Iterable[int]]) -> None:
     """
     Make `facility_ids` the unit's full facility set.

     An empty or missing list leaves the current associations untouched; it
     does not clear them.
     """
     if not facility_ids:
          return

     requested = list(dict.fromkeys(facility_ids))
     found = db.query(Facility.id).filter(Facility.id.in_(requested)).count()
     if found != len(requested):
          raise BadRequest("One or more facilities not found")

     unit.facilities.clear()
     db.flush()

     for facility_id in requested:
          unit.facilities.append(UnitFacility(facility_id=facility_id))
     db.flush()


def replace_images(db: Session, unit: Unit, images: Optional[List[UploadedFile]], blob_store: BlobStore) -> None:
     """
     Swap the unit's images for `images`.

     Old blobs are deleted best-effort and the old rows are removed; each new
     file is stored and gets a UnitImage row. No images means no change.
     """
     if not images:
          return

     for image in list(unit.images):
          if image.image_url:
               blob_store.discard(image.image_url)
     unit.images.clear()
     db.flush()

     for upload in images:
          stored = blob_store.store(upload.content, upload.filename)
          unit.images.append(UnitImage(image_url=stored.reference, description=""))
     db.flush()
