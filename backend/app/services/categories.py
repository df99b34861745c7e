"""Category tree service.

Categories are loaded into an id-keyed map and walked through parent_id,
so tree operations never rely on ORM relationship traversal.
"""
import logging

from sqlalchemy.orm import Session

from app.errors import CategoryCycleError, ValidationError
from app.models.category import Category
from app.schemas.category import CategoryCreate, CategoryNode, CategoryResponse, CategoryUpdate
from app.schemas.common import FieldViolation

logger = logging.getLogger(__name__)


def get_categories(db: Session, household_id: str) -> list[Category]:
    """Get all categories of a household ordered by name."""
    return (
        db.query(Category)
        .filter(Category.household_id == household_id)
        .order_by(Category.name)
        .all()
    )


def get_category(db: Session, household_id: str, category_id: str) -> Category | None:
    return db.query(Category).filter(
        Category.id == category_id,
        Category.household_id == household_id,
    ).first()


def build_category_tree(categories: list[Category]) -> list[CategoryNode]:
    """Nest categories under their parents.

    Categories whose parent is not in the list are treated as roots. Input
    order is kept among siblings.
    """
    nodes = {c.id: CategoryNode.model_validate(c) for c in categories}
    roots = []
    for category in categories:
        node = nodes[category.id]
        parent = nodes.get(category.parent_id) if category.parent_id else None
        if parent is None:
            roots.append(node)
        else:
            parent.children.append(node)
    return roots


def ancestor_ids(parents: dict[str, str | None], category_id: str) -> list[str]:
    """Walk parent links upward from a category, nearest ancestor first.

    Stops at a repeated id so data that already contains a loop cannot hang
    the walk.
    """
    ancestors = []
    seen = {category_id}
    current = parents.get(category_id)
    while current is not None and current not in seen:
        ancestors.append(current)
        seen.add(current)
        current = parents.get(current)
    return ancestors


def _parent_violation(message: str, constraint: str = "parent") -> list[FieldViolation]:
    return [FieldViolation(field="parent_id", constraint=constraint, message=message)]


def _check_parent(db: Session, household_id: str, parent_id: str) -> None:
    if get_category(db, household_id, parent_id) is None:
        raise ValidationError(_parent_violation("Parent category not found"))


def create_category(db: Session, household_id: str, data: CategoryCreate) -> CategoryResponse:
    """Create a category, optionally under an existing parent in the same household."""
    if data.parent_id:
        _check_parent(db, household_id, data.parent_id)

    category = Category(**data.model_dump(), household_id=household_id)
    db.add(category)
    db.commit()
    db.refresh(category)
    logger.info(f"Created category {category.id} ({category.name}) in household {household_id}")
    return CategoryResponse.model_validate(category)


def update_category(
    db: Session,
    household_id: str,
    category: Category,
    data: CategoryUpdate,
) -> CategoryResponse:
    """Apply a partial update. Re-parenting may not create a cycle.

    Raises:
        ValidationError: the new parent does not exist in the household.
        CategoryCycleError: the new parent is the category itself or one of
            its descendants.
    """
    changes = data.model_dump(exclude_unset=True)
    if changes.get("name", "") is None:
        del changes["name"]

    if changes.get("parent_id"):
        new_parent_id = changes["parent_id"]
        if new_parent_id == category.id:
            raise CategoryCycleError(_parent_violation("A category cannot be its own parent", "cycle"))
        _check_parent(db, household_id, new_parent_id)

        parents = {c.id: c.parent_id for c in get_categories(db, household_id)}
        if category.id in ancestor_ids(parents, new_parent_id):
            raise CategoryCycleError(
                _parent_violation("A category cannot be moved under one of its descendants", "cycle")
            )

    for field, value in changes.items():
        setattr(category, field, value)

    db.commit()
    db.refresh(category)
    return CategoryResponse.model_validate(category)
