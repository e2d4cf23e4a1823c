"""Category Schemas - flat category contract; every field required and non-empty."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CategoryCreate(BaseModel):
    """Used for both create and full-replace update."""
    model_config = ConfigDict(extra="ignore")

    categoryid: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=120)
    type: str = Field(min_length=1, max_length=40)
    color: str = Field(min_length=1, max_length=32)
    icon: str = Field(min_length=1, max_length=64)


class CategoryResponse(CategoryCreate):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
