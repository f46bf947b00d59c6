# services/pagination.py
import math
from typing import Optional

from sqlalchemy.orm import Query

from services.errors import BadRequest

DEFAULT_PAGE_SIZE = 10


def paginate(query: Query, page: Optional[int] = None, limit: Optional[int] = None) -> dict:
     """
     Run `query` (already filtered and ordered) and cut out one page.

     Without page and limit every row is returned and only `total` is set.
     A page without a limit uses DEFAULT_PAGE_SIZE.
     """
     if page is not None and page < 1:
          raise BadRequest("Page must be 1 or greater")
     if limit is not None and limit < 1:
          raise BadRequest("Limit must be 1 or greater")

     if limit is None and page is not None:
          limit = DEFAULT_PAGE_SIZE

     if limit is None:
          data = query.all()
          return {"data": data, "total": len(data)}

     current_page = page or 1
     total = query.order_by(None).count()
     data = query.offset((current_page - 1) * limit).limit(limit).all()

     last_page = math.ceil(total / limit)
     return {
          "data": data,
          "total": total,
          "current_page": current_page,
          "prev_page": current_page - 1 if current_page > 1 else None,
          "next_page": current_page + 1 if current_page < last_page else None,
          "last_page": last_page,
     }
