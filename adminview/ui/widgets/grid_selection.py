"""
Grid Selection Controller

Row-click multi-select for admin grids. Clicking anywhere in a row toggles
the checkbox of that row, checked rows carry a visual marker, and an
external counter hears about every checkbox the controller flips.
"""

import logging
import re
from contextlib import nullcontext
from dataclasses import dataclass
from functools import partial
from typing import Callable, List, Optional, Tuple

from PyQt6.QtCore import QEvent, QObject, QRegularExpression, Qt
from PyQt6.QtWidgets import (QApplication, QCheckBox, QFrame, QLabel, QPushButton,
                             QToolButton, QWidget)

from adminview.ui.theme import refresh_widget
from adminview.utils.constants import GridNames, GridProperties

logger = logging.getLogger(__name__)

# (checked, container_id)
SelectionNotifier = Callable[[bool, Optional[str]], None]

_LINK_RE = re.compile(r"<a\s", re.IGNORECASE)


@dataclass
class RowBinding:
    """A tracked row paired with the checkbox that selects it"""
    index: int
    row: QWidget
    checkbox: Optional[QCheckBox] = None


class TextSelectionGuard:
    """
    Suspends mouse text selection for every label under a widget tree.

    Each label gets its own interaction flags back on exit, whatever
    way the guarded block is left.
    """

    def __init__(self, document: QWidget):
        self.document = document
        self._saved: List[Tuple[QLabel, Qt.TextInteractionFlag]] = []

    def __enter__(self):
        for label in self.document.findChildren(QLabel):
            flags = label.textInteractionFlags()
            if flags & Qt.TextInteractionFlag.TextSelectableByMouse:
                self._saved.append((label, flags))
                label.setTextInteractionFlags(flags & ~Qt.TextInteractionFlag.TextSelectableByMouse)
        logger.debug(f"Text selection suspended on {len(self._saved)} labels")
        return self

    def __exit__(self, exc_type, exc, tb):
        for label, flags in self._saved:
            label.setTextInteractionFlags(flags)
        self._saved.clear()
        return False


class GridSelectionController(QObject):
    """
    Keeps row markers in step with the per-row checkboxes of an admin grid.

    The controller binds once against the widgets present at construction:
    the container named ``form_name``, the checkboxes inside it, every
    ``row*`` frame in the document and the optional ``checkall-toggle``.
    Missing structure never raises; the affected feature just does nothing.
    """

    def __init__(self, document: QWidget, form_name: str = GridNames.DEFAULT_FORM,
                 notifier: Optional[SelectionNotifier] = None, parent: Optional[QObject] = None):
        """
        Args:
            document: Root of the widget tree to search
            form_name: objectName of the container holding the checkboxes
            notifier: Called with ``(checked, container_id)`` whenever the
                controller changes a checkbox
            parent: Optional QObject owner
        """
        super().__init__(parent)
        self.document = document
        self.notifier = notifier
        self.container: Optional[QWidget] = None
        self.checkall_toggle: Optional[QCheckBox] = None
        self.boxes: List[QCheckBox] = []
        self.bindings: List[RowBinding] = []
        self._connections = []
        # Row that received the last left press; a click completes on release
        self._pressed_row: Optional[QWidget] = None

        self.container = self._find_container(document, form_name)
        if self.container is None:
            logger.debug(f"No container named '{form_name}'; grid selection disabled")
            return

        self.boxes = self.container.findChildren(QCheckBox)
        self.checkall_toggle = document.findChild(QCheckBox, GridNames.CHECKALL_TOGGLE)
        rows = document.findChildren(QFrame, QRegularExpression(GridNames.ROW_PATTERN))

        # With a select-all toggle the first box in the form belongs to it
        offset = 1 if self.checkall_toggle is not None else 0
        for i, row in enumerate(rows):
            box_index = i + offset
            checkbox = self.boxes[box_index] if box_index < len(self.boxes) else None
            self.bindings.append(RowBinding(i, row, checkbox))

        self._connect()
        self._sync_initial_state()
        logger.debug(f"Bound {len(self.bindings)} rows and {len(self.boxes)} checkboxes "
                     f"in '{self.container_id}'")

    @staticmethod
    def _find_container(document: QWidget, form_name: str) -> Optional[QWidget]:
        if document is None:
            return None
        if document.objectName() == form_name:
            return document
        return document.findChild(QWidget, form_name)

    @property
    def container_id(self) -> Optional[str]:
        return self.container.objectName() if self.container is not None else None

    def _connect(self):
        if self.checkall_toggle is not None:
            self.checkall_toggle.clicked.connect(self.toggle_by_select_all)
            self._connections.append((self.checkall_toggle.clicked, self.toggle_by_select_all))

        for binding in self.bindings:
            binding.row.installEventFilter(self)
            if binding.checkbox is not None:
                slot = partial(self._on_checkbox_clicked, binding)
                binding.checkbox.clicked.connect(slot)
                self._connections.append((binding.checkbox.clicked, slot))

    def unbind(self):
        """Detach from every widget; the controller becomes inert"""
        for signal, slot in self._connections:
            try:
                signal.disconnect(slot)
            except (TypeError, RuntimeError):
                # Widget already gone
                pass
        self._connections.clear()

        for binding in self.bindings:
            try:
                binding.row.removeEventFilter(self)
            except RuntimeError:
                pass
        self.bindings = []
        self.boxes = []

    def _sync_initial_state(self):
        """Mark rows whose checkbox was already checked before binding"""
        for binding in self.bindings:
            if binding.checkbox is not None and binding.checkbox.isChecked():
                self._notify(True)
                self.mark_row(binding.row, True)

    def binding_for(self, row: QWidget) -> Optional[RowBinding]:
        for binding in self.bindings:
            if binding.row is row:
                return binding
        return None

    def selected_indexes(self) -> List[int]:
        """Positions of the rows whose checkbox is checked"""
        return [b.index for b in self.bindings
                if b.checkbox is not None and b.checkbox.isChecked()]

    # ------------------------------------------------------------------
    # Event handling
    # ------------------------------------------------------------------

    def eventFilter(self, watched, event):
        event_type = event.type()
        if event_type not in (QEvent.Type.MouseButtonPress, QEvent.Type.MouseButtonRelease,
                              QEvent.Type.MouseButtonDblClick):
            return False
        if event.button() != Qt.MouseButton.LeftButton:
            return False

        pos = event.position().toPoint()
        if event_type == QEvent.Type.MouseButtonPress:
            self._pressed_row = watched
            return False

        if event_type == QEvent.Type.MouseButtonRelease:
            # Released elsewhere than where it was pressed, or dragged off the row
            if self._pressed_row is not watched or not watched.rect().contains(pos):
                self._pressed_row = None
                return False
        # A double click is the second click of the pair; its release adds nothing
        self._pressed_row = None

        target = watched.childAt(pos) or watched
        shift_held = bool(event.modifiers() & Qt.KeyboardModifier.ShiftModifier)
        self.on_row_activated(watched, target, shift_held)
        return False

    def _on_checkbox_clicked(self, binding: RowBinding, checked: bool = False):
        shift_held = bool(QApplication.keyboardModifiers() & Qt.KeyboardModifier.ShiftModifier)
        self.on_row_activated(binding.row, binding.checkbox, shift_held)

    def toggle_by_select_all(self, checked: bool):
        """Mirror the select-all toggle on every row marker"""
        for binding in self.bindings:
            self.mark_row(binding.row, checked)
        logger.debug(f"Select-all set {len(self.bindings)} rows to {checked}")

    def on_row_activated(self, row: QWidget, click_target: Optional[QWidget] = None,
                         shift_held: bool = False):
        """
        Toggle the checkbox of a clicked row and refresh its marker.

        Args:
            row: The row frame that was clicked
            click_target: Widget under the cursor; the row itself when None
            shift_held: Whether Shift was down, which suspends text selection
                for the duration of the toggle
        """
        target = click_target if click_target is not None else row
        if self._is_interactive(target):
            return

        if not self.boxes:
            return

        binding = self.binding_for(row)
        if binding is None:
            logger.debug("Activated row is not tracked")
            return
        checkbox = binding.checkbox
        if checkbox is None:
            logger.debug(f"Row {binding.index} has no aligned checkbox")
            return

        guard = TextSelectionGuard(self.document.window()) if shift_held else nullcontext()
        with guard:
            # A direct click on the box has already toggled it natively
            if target is not checkbox:
                checkbox.setChecked(not checkbox.isChecked())
                self._notify(checkbox.isChecked())
            self.mark_row(row, checkbox.isChecked())

    @staticmethod
    def _is_interactive(widget: QWidget) -> bool:
        """Links and buttons keep their own click behavior"""
        if isinstance(widget, (QPushButton, QToolButton)):
            return True
        if isinstance(widget, QLabel):
            if widget.openExternalLinks():
                return True
            # Plain-text cells show markup literally, anchors included
            if widget.textFormat() == Qt.TextFormat.PlainText:
                return False
            return bool(_LINK_RE.search(widget.text()))
        return False

    def _notify(self, checked: bool):
        if self.notifier is not None:
            self.notifier(checked, self.container_id)

    # ------------------------------------------------------------------
    # Visual marker
    # ------------------------------------------------------------------

    @staticmethod
    def mark_row(row: QWidget, selected: bool):
        """Set the selected marker on a row and its cells"""
        cells = row.findChildren(QWidget, "", Qt.FindChildOption.FindDirectChildrenOnly)
        for widget in [row] + cells:
            widget.setProperty(GridProperties.ROW_SELECTED, selected)
            refresh_widget(widget)

    @staticmethod
    def is_row_selected(row: QWidget) -> bool:
        return bool(row.property(GridProperties.ROW_SELECTED))
