"""Main Window - AdminView dashboard"""

import logging
from PyQt6.QtWidgets import QMainWindow, QStatusBar

from adminview.data.action_logs import ActionLogSource
from adminview.data.categories import build_page_title
from adminview.ui.latest_actions_panel import LatestActionsPanel
from adminview.utils.config import resolve_form_name

logger = logging.getLogger(__name__)


class DashboardWindow(QMainWindow):
    """Administrator dashboard window"""

    PAGE_TITLE = "Latest Actions"

    def __init__(self, config, source: ActionLogSource):
        super().__init__()
        self.config = config
        self.source = source
        self.init_ui()
        logger.info("Dashboard window initialized")

    def init_ui(self):
        """Initialize the UI"""
        self.setWindowTitle(build_page_title(
            self.PAGE_TITLE, self.config.site_name, self.config.sitename_pagetitles
        ))
        self.resize(self.config.window_width, self.config.window_height)
        self.setMinimumSize(self.config.window_min_width, self.config.window_min_height)

        self.latest_actions = LatestActionsPanel(
            self.source,
            count=self.config.latest_actions_count,
            form_name=resolve_form_name(self.config.page_options, self.config.form_name),
        )
        self.setCentralWidget(self.latest_actions)

        self.setStatusBar(QStatusBar())
        self.latest_actions.grid.selection_changed.connect(self._on_selection_changed)
        self.statusBar().showMessage("Ready")

    def _on_selection_changed(self, count: int):
        self.statusBar().showMessage(f"{count} item(s) selected" if count else "Ready")
