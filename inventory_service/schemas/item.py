import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ItemBase(BaseModel):
    name: str
    description: str | None = None


class ItemCreate(ItemBase):
    """Fields written by /register; photo is the stored filename, if any."""

    photo: str | None = None


class ItemUpdate(BaseModel):
    """Partial update; a field left out (or null) keeps its current value."""

    name: str | None = None
    description: str | None = None


class Item(ItemBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    photo: str | None = None


INTEGER_ID = re.compile(r"-?\d+", re.ASCII)


class SearchRequest(BaseModel):
    id: int | str = Field(..., description="Item identifier, as a number or numeric string")
    # only the exact string "on" (an HTML checkbox) asks for the photo link
    includePhoto: Any = None

    @field_validator("id", mode="before")
    @classmethod
    def _reject_booleans(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("id must be an integer")
        return value

    def item_id(self) -> int | None:
        """Return the identifier as an int, or None when it is not a plain decimal integer."""
        if isinstance(self.id, int):
            return self.id
        text = self.id.strip()
        if not INTEGER_ID.fullmatch(text):
            return None
        return int(text)

    @property
    def wants_photo(self) -> bool:
        return self.includePhoto == "on"
