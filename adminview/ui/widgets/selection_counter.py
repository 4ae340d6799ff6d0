"""Selection Counter - tracks how many grid rows are checked"""

import logging
from typing import Iterable, List, Optional

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import QCheckBox

logger = logging.getLogger(__name__)


class SelectionCounter(QObject):
    """
    Running count of checked boxes in one admin form.

    Bulk-action toolbars listen to ``count_changed`` to enable themselves
    while something is checked. The select-all toggle, if bound, follows
    the count: it is checked exactly when every box is.
    """

    count_changed = pyqtSignal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._count = 0
        self.checkboxes: List[QCheckBox] = []
        self.toggle: Optional[QCheckBox] = None

    @property
    def count(self) -> int:
        return self._count

    @property
    def total(self) -> int:
        return len(self.checkboxes)

    def bind(self, checkboxes: Iterable[QCheckBox], toggle: Optional[QCheckBox] = None):
        """Adopt a new set of row checkboxes; the count starts over at zero"""
        self.checkboxes = list(checkboxes)
        self.toggle = toggle
        self.reset()

    def reset(self):
        self._set_count(0)

    def is_checked(self, checked: bool, container_id: Optional[str] = None):
        """Record that one box changed state"""
        if checked:
            self._set_count(self._count + 1)
        else:
            self._set_count(max(self._count - 1, 0))
        logger.debug(f"{container_id or 'form'}: {self._count} of {self.total} checked")

    def check_all(self, checked: bool):
        """Check or uncheck every bound box at once"""
        for box in self.checkboxes:
            box.setChecked(checked)
        self._set_count(self.total if checked else 0)

    def _set_count(self, value: int):
        self._count = value
        if self.toggle is not None:
            self.toggle.setChecked(self.total > 0 and self._count == self.total)
        self.count_changed.emit(self._count)
