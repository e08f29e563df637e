from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    # Extra keys in the inventory document are kept as-is
    model_config = ConfigDict(extra="allow")

    name: str
    # Unbounded so one bad count does not invalidate the document; bookings refuse count <= 0
    count: int


class Category(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    items: List[Item] = Field(default_factory=list)

    def find_item(self, name: str) -> Optional[Item]:
        return next((it for it in self.items if it.name == name), None)


class Catalog(BaseModel):
    """The full category -> item -> count tree; single source of truth for stock."""

    model_config = ConfigDict(extra="allow")

    categories: List[Category] = Field(default_factory=list)

    def find_category(self, name: str) -> Optional[Category]:
        return next((c for c in self.categories if c.name == name), None)

    def to_document(self) -> dict:
        return self.model_dump(mode="json")
