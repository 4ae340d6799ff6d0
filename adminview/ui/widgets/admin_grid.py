"""AdminGrid - checkbox list grid used by admin list views"""

import html
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QCheckBox, QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from adminview.ui.widgets.grid_selection import GridSelectionController
from adminview.ui.widgets.selection_counter import SelectionCounter
from adminview.utils.constants import GridNames

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinkCell:
    """A cell rendered as a hyperlink"""
    text: str
    href: str


CellValue = Union[str, LinkCell]


class AdminGrid(QWidget):
    """
    Rows of cells, each row led by a checkbox, under a header that can
    carry a select-all toggle.

    Clicking a row toggles its checkbox; the selection is tracked by a
    GridSelectionController built on every ``populate``.
    """

    selection_changed = pyqtSignal(int)  # number of checked rows
    link_activated = pyqtSignal(str)     # href

    def __init__(self, columns: Sequence[str], form_name: str = GridNames.DEFAULT_FORM,
                 select_all: bool = True, parent=None):
        super().__init__(parent)
        self.columns = list(columns)
        self.form_name = form_name
        self.select_all = select_all

        self.counter = SelectionCounter(self)
        self.counter.count_changed.connect(self.selection_changed)
        self.controller: Optional[GridSelectionController] = None
        self.checkall_toggle: Optional[QCheckBox] = None
        self.row_frames: List[QFrame] = []
        self.checkboxes: List[QCheckBox] = []

        self.init_ui()

    def init_ui(self):
        """Initialize the UI"""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.form = QWidget(self)
        self.form.setObjectName(self.form_name)
        form_layout = QVBoxLayout(self.form)
        form_layout.setContentsMargins(0, 0, 0, 0)
        form_layout.setSpacing(0)

        header = QFrame(self.form)
        header.setObjectName("grid_header")
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(6, 4, 6, 4)
        if self.select_all:
            self.checkall_toggle = QCheckBox(header)
            self.checkall_toggle.setObjectName(GridNames.CHECKALL_TOGGLE)
            self.checkall_toggle.setToolTip("Check All Items")
            self.checkall_toggle.clicked.connect(self.counter.check_all)
            header_layout.addWidget(self.checkall_toggle)
        else:
            # Keep the columns aligned with the row checkboxes
            header_layout.addSpacing(20)
        for column in self.columns:
            title = QLabel(column, header)
            title.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
            header_layout.addWidget(title, 1)
        form_layout.addWidget(header)

        self.rows_host = QWidget(self.form)
        self.rows_layout = QVBoxLayout(self.rows_host)
        self.rows_layout.setContentsMargins(0, 0, 0, 0)
        self.rows_layout.setSpacing(0)
        self.rows_layout.addStretch()
        form_layout.addWidget(self.rows_host, 1)

        layout.addWidget(self.form)

    def populate(self, rows: Iterable[Sequence[CellValue]], checked: Iterable[int] = ()):
        """
        Rebuild the grid rows.

        Args:
            rows: One sequence of cell values per row
            checked: Row positions whose checkbox starts checked, e.g. a
                selection carried over from before a refresh
        """
        self._clear_rows()
        checked = set(checked)

        for i, cells in enumerate(rows):
            frame = QFrame(self.rows_host)
            frame.setObjectName(f"row{i % 2}")
            row_layout = QHBoxLayout(frame)
            row_layout.setContentsMargins(6, 4, 6, 4)

            box = QCheckBox(frame)
            box.setObjectName(f"{GridNames.CHECKBOX_PREFIX}{i}")
            box.setChecked(i in checked)
            box.clicked.connect(self._on_box_clicked)
            row_layout.addWidget(box)

            for value in cells:
                row_layout.addWidget(self._make_cell(value, frame), 1)

            self.rows_layout.insertWidget(self.rows_layout.count() - 1, frame)
            self.row_frames.append(frame)
            self.checkboxes.append(box)

        self.counter.bind(self.checkboxes, self.checkall_toggle)
        self.controller = GridSelectionController(
            self, self.form_name, notifier=self.counter.is_checked, parent=self
        )
        logger.debug(f"AdminGrid '{self.form_name}' populated with {len(self.row_frames)} rows")

    def _make_cell(self, value: CellValue, parent: QWidget) -> QLabel:
        if isinstance(value, LinkCell):
            label = QLabel(f'<a href="{html.escape(value.href, quote=True)}">'
                           f'{html.escape(value.text)}</a>', parent)
            label.setTextFormat(Qt.TextFormat.RichText)
            label.linkActivated.connect(self.link_activated)
            return label
        label = QLabel(str(value), parent)
        label.setTextFormat(Qt.TextFormat.PlainText)
        return label

    def _clear_rows(self):
        if self.controller is not None:
            self.controller.unbind()
            self.controller.deleteLater()
            self.controller = None

        for frame in self.row_frames:
            self.rows_layout.removeWidget(frame)
            frame.setParent(None)
            frame.deleteLater()
        self.row_frames = []
        self.checkboxes = []

        if self.checkall_toggle is not None:
            self.checkall_toggle.setChecked(False)

    def _on_box_clicked(self, checked: bool):
        # A click on the box itself is counted here; the controller only
        # counts the boxes it flips for row clicks
        self.counter.is_checked(checked, self.form_name)

    def checked_rows(self) -> List[int]:
        """Positions of the checked rows"""
        if self.controller is None:
            return []
        return self.controller.selected_indexes()

    def row_count(self) -> int:
        return len(self.row_frames)
