"""Access checks and window titles for category listings"""

import logging
from typing import Collection, Iterable, List, Optional, TypeVar

from adminview.models.category import Category
from adminview.utils.constants import PAGE_TITLE_FORMAT, SiteNamePosition

logger = logging.getLogger(__name__)

T = TypeVar('T')


class CategoryNotFoundError(LookupError):
    """The requested category (or its parent) does not exist"""


class CategoryAccessError(PermissionError):
    """The user's view levels do not include the category's access level"""


def check_category_access(category: Optional[Category], authorised_levels: Collection[int],
                          parent: Optional[Category] = None, require_parent: bool = False):
    """
    Refuse a category the user may not view

    Args:
        category: Category being displayed; None when the lookup failed
        authorised_levels: View access levels granted to the user
        parent: Parent category, if it was looked up
        require_parent: Treat a missing parent as a missing category

    Raises:
        CategoryNotFoundError: If the category (or a required parent) is missing
        CategoryAccessError: If the category's access level is not authorised
    """
    if category is None:
        raise CategoryNotFoundError("Category not found")
    if require_parent and parent is None:
        raise CategoryNotFoundError(f"Parent of category {category.id} not found")
    if category.access not in authorised_levels:
        logger.info(f"Category {category.id} refused: access level {category.access} "
                    f"not in {sorted(authorised_levels)}")
        raise CategoryAccessError(f"Not authorised to view category '{category.title}'")


def filter_by_access(entries: Iterable[T], authorised_levels: Collection[int]) -> List[T]:
    """Keep the items or categories whose access level the user holds"""
    return [entry for entry in entries if entry.access in authorised_levels]


def build_page_title(page_title: Optional[str], site_name: str,
                     position: int = SiteNamePosition.NONE) -> str:
    """
    Compose a window title from the page title and the site name

    An empty page title falls back to the site name alone; otherwise the
    site name is put before or after the page title, or left out.
    """
    if not page_title:
        return site_name
    if position == SiteNamePosition.BEFORE:
        return PAGE_TITLE_FORMAT.format(site_name, page_title)
    if position == SiteNamePosition.AFTER:
        return PAGE_TITLE_FORMAT.format(page_title, site_name)
    return page_title


def resolve_page_heading(page_heading: Optional[str] = None, page_title: Optional[str] = None,
                         menu_title: Optional[str] = None, default_title: str = "") -> str:
    """Heading shown above a listing: explicit heading, then page title, then menu title"""
    if page_heading:
        return page_heading
    if menu_title is not None:
        return page_title or menu_title
    return default_title
