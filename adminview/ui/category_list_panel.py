"""Category List panel - items of one category in a selectable grid"""

import logging
from typing import Collection, Iterable, List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QScrollArea, QVBoxLayout, QWidget

from adminview.data.categories import (build_page_title, check_category_access,
                                       filter_by_access, resolve_page_heading)
from adminview.models.category import Category, CategoryItem
from adminview.ui.widgets.admin_grid import AdminGrid
from adminview.utils.constants import GridNames, SiteNamePosition

logger = logging.getLogger(__name__)


class CategoryListPanel(QWidget):
    """
    Lists the items of a category the user is allowed to see.

    Construction refuses a category outside the user's view levels by
    raising CategoryAccessError; items and subcategories the user may not
    view are left out of the listing.
    """

    COLUMNS = ["ID", "Title", "Author"]

    def __init__(self, category: Optional[Category], items: Iterable[CategoryItem],
                 authorised_levels: Collection[int], site_name: str,
                 sitename_pagetitles: int = SiteNamePosition.NONE,
                 page_title: Optional[str] = None, menu_title: Optional[str] = None,
                 form_name: str = GridNames.DEFAULT_FORM, parent=None):
        super().__init__(parent)
        check_category_access(category, authorised_levels)
        self.category = category
        self.authorised_levels = set(authorised_levels)
        self.site_name = site_name
        self.sitename_pagetitles = sitename_pagetitles
        self.page_title = page_title
        self.menu_title = menu_title
        self.form_name = form_name

        self.items: List[CategoryItem] = filter_by_access(items, self.authorised_levels)
        self.children: List[Category] = filter_by_access(category.children, self.authorised_levels)
        self.init_ui()
        logger.info(f"Category '{category.title}': {len(self.items)} items, "
                    f"{len(self.children)} subcategories visible")

    def init_ui(self):
        """Initialize the UI"""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)

        self.heading = QLabel(resolve_page_heading(
            page_title=self.page_title, menu_title=self.menu_title,
            default_title=self.category.title))
        self.heading.setObjectName("panel_heading")
        self.heading.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(self.heading)

        self.children_label = QLabel(", ".join(child.title for child in self.children))
        self.children_label.setVisible(bool(self.children))
        layout.addWidget(self.children_label)

        self.grid = AdminGrid(self.COLUMNS, form_name=self.form_name)
        self.grid.populate([[str(item.id), item.title, item.author] for item in self.items])

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.grid)
        layout.addWidget(scroll, 1)

    def window_title(self) -> str:
        return build_page_title(self.page_title, self.site_name, self.sitename_pagetitles)

    def prepare_window(self) -> str:
        """Set the title of the hosting window and return it"""
        title = self.window_title()
        self.window().setWindowTitle(title)
        return title

    def selected_items(self) -> List[CategoryItem]:
        return [self.items[i] for i in self.grid.checked_rows()]
