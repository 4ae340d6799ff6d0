"""Latest Actions panel - dashboard widget listing recent audit-log actions"""

import logging
from typing import List

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QScrollArea, QVBoxLayout, QWidget

from adminview.data.action_logs import ActionLogSource, get_latest_actions
from adminview.models.action_log import ActionLog
from adminview.ui.widgets.admin_grid import AdminGrid
from adminview.utils.constants import ActionLogQuery, GridNames

logger = logging.getLogger(__name__)


class LatestActionsPanel(QWidget):
    """Most recent administrator actions in a selectable grid"""

    COLUMNS = ["ID", "Action", "Date", "User"]
    DATE_FORMAT = "%Y-%m-%d %H:%M"

    def __init__(self, source: ActionLogSource, count: int = ActionLogQuery.DEFAULT_COUNT,
                 form_name: str = GridNames.DEFAULT_FORM, parent=None):
        super().__init__(parent)
        self.source = source
        self.count = count
        self.form_name = form_name
        self.actions: List[ActionLog] = []
        self.init_ui()
        self.refresh()

    def init_ui(self):
        """Initialize the UI"""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)

        header_layout = QHBoxLayout()
        self.heading = QLabel("Latest Actions")
        self.heading.setObjectName("panel_heading")
        self.heading.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        header_layout.addWidget(self.heading)
        header_layout.addStretch()
        self.count_label = QLabel()
        self.count_label.setObjectName("selection_count")
        header_layout.addWidget(self.count_label)
        layout.addLayout(header_layout)

        self.grid = AdminGrid(self.COLUMNS, form_name=self.form_name)
        self.grid.selection_changed.connect(self._update_count_label)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.grid)
        layout.addWidget(scroll, 1)

        self.empty_label = QLabel("No Matching Results")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.empty_label)

    def refresh(self):
        """Reload the latest actions from the source"""
        self.actions = get_latest_actions(self.source, self.count)
        self.grid.populate([
            [str(action.id),
             action.message,
             action.log_date.strftime(self.DATE_FORMAT),
             str(action.user_id) if action.user_id is not None else ""]
            for action in self.actions
        ])
        self.empty_label.setVisible(not self.actions)
        self._update_count_label(self.grid.counter.count)
        logger.info(f"Latest actions refreshed: {len(self.actions)} shown")

    def selected_actions(self) -> List[ActionLog]:
        return [self.actions[i] for i in self.grid.checked_rows()]

    def _update_count_label(self, count: int):
        self.count_label.setText(f"{count} selected" if count else "")
