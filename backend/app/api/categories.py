"""Categories API endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_identity, get_db
from app.schemas.category import CategoryCreate, CategoryNode, CategoryResponse, CategoryUpdate
from app.services.auth import Identity
from app.services.categories import (
    build_category_tree,
    create_category,
    get_categories,
    get_category,
    update_category,
)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
def list_categories(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """List household categories by name."""
    return get_categories(db, identity.household_id)


@router.get("/tree", response_model=list[CategoryNode])
def category_tree(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """List root categories with their children nested."""
    return build_category_tree(get_categories(db, identity.household_id))


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def add_category(
    category_data: CategoryCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """Create a category."""
    return create_category(db, identity.household_id, category_data)


@router.patch("/{category_id}", response_model=CategoryResponse)
def edit_category(
    category_id: str,
    category_data: CategoryUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """Update a category, including moving it under another parent."""
    category = get_category(db, identity.household_id, category_id)
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )
    return update_category(db, identity.household_id, category, category_data)
