# schemas/common.py
"""
Shared pydantic building blocks.

Python code uses snake_case; JSON on the wire uses camelCase aliases.
"""
from typing import Callable, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
          from_attributes=True,
     )


class Page(CamelModel, Generic[T]):
     """List response; page fields are only set when a page was requested."""
     data: List[T]
     total: int
     current_page: Optional[int] = None
     prev_page: Optional[int] = None
     next_page: Optional[int] = None
     last_page: Optional[int] = None


class SuccessResponse(CamelModel):
     success: bool = True


def build_page(result: dict, build_item: Callable) -> dict:
     """Turn a paginate() result into a Page payload using `build_item` for each row."""
     return {**result, "data": [build_item(row) for row in result["data"]]}
