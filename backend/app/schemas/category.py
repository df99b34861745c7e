"""Category schemas."""
from pydantic import BaseModel, Field


class CategorySummary(BaseModel):
    """Category fields shown alongside a transaction."""

    id: str
    name: str
    color: str | None = None
    icon: str | None = None
    parent_id: str | None = None

    class Config:
        from_attributes = True


class CategoryResponse(CategorySummary):
    """Category listing entry."""

    description: str | None = None
    household_id: str


class CategoryNode(CategoryResponse):
    """Category with its children resolved, for tree views."""

    children: list["CategoryNode"] = Field(default_factory=list)


class CategoryCreate(BaseModel):
    """Request to create a category."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    color: str | None = Field(None, max_length=50)
    icon: str | None = Field(None, max_length=50)
    parent_id: str | None = None


class CategoryUpdate(BaseModel):
    """Request to update a category. Omitted fields are left unchanged."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    color: str | None = Field(None, max_length=50)
    icon: str | None = Field(None, max_length=50)
    parent_id: str | None = None


CategoryNode.model_rebuild()
