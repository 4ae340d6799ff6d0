"""Tests for the row-click multi-select controller"""

import pytest
from PyQt6.QtCore import QEvent, QPointF, Qt
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QApplication, QLabel, QPushButton, QWidget

from adminview.ui.widgets.grid_selection import GridSelectionController, TextSelectionGuard

SELECTABLE = Qt.TextInteractionFlag.TextSelectableByMouse


def rows_match_boxes(controller):
    return all(
        GridSelectionController.is_row_selected(b.row) == b.checkbox.isChecked()
        for b in controller.bindings if b.checkbox is not None
    )


@pytest.mark.parametrize("select_all", [False, True])
@pytest.mark.parametrize("row_count", [0, 1, 5])
def test_row_toggles_aligned_checkbox(make_surface, notifications, row_count, select_all):
    surface = make_surface(row_count, select_all=select_all)
    controller = GridSelectionController(surface.document, notifier=notifications)
    offset = 1 if select_all else 0

    assert len(controller.bindings) == row_count
    for i, row in enumerate(surface.rows):
        assert controller.bindings[i].checkbox is controller.boxes[i + offset]
        controller.on_row_activated(row, surface.titles[i])
        assert controller.boxes[i + offset].isChecked()
        assert controller.boxes[i + offset] is surface.boxes[i]

    assert notifications.calls == [(True, "adminForm")] * row_count


def test_link_click_leaves_checkboxes_alone(make_surface, notifications):
    surface = make_surface(3)
    controller = GridSelectionController(surface.document, notifier=notifications)

    controller.on_row_activated(surface.rows[1], surface.links[1])

    assert [box.isChecked() for box in surface.boxes] == [False, False, False]
    assert not GridSelectionController.is_row_selected(surface.rows[1])
    assert notifications.calls == []


def test_button_click_leaves_checkboxes_alone(make_surface, notifications):
    surface = make_surface(2)
    button = QPushButton("Publish", surface.rows[0])
    controller = GridSelectionController(surface.document, notifier=notifications)

    controller.on_row_activated(surface.rows[0], button)

    assert not surface.boxes[0].isChecked()
    assert notifications.calls == []


def test_direct_checkbox_click_flips_once(make_surface, notifications):
    surface = make_surface(3)
    controller = GridSelectionController(surface.document, notifier=notifications)

    surface.boxes[2].click()

    assert surface.boxes[2].isChecked()
    assert GridSelectionController.is_row_selected(surface.rows[2])
    # The native click is reported by the box's own wiring, not here
    assert notifications.calls == []

    surface.boxes[2].click()
    assert not surface.boxes[2].isChecked()
    assert not GridSelectionController.is_row_selected(surface.rows[2])
    assert controller.selected_indexes() == []


def test_markers_follow_checkbox_state(make_surface, notifications):
    surface = make_surface(4, select_all=True)
    controller = GridSelectionController(surface.document, notifier=notifications)

    controller.on_row_activated(surface.rows[0])
    controller.on_row_activated(surface.rows[2], surface.titles[2])
    surface.boxes[3].click()
    controller.on_row_activated(surface.rows[0])

    assert [box.isChecked() for box in surface.boxes] == [False, False, True, True]
    assert rows_match_boxes(controller)
    assert controller.selected_indexes() == [2, 3]
    assert notifications.calls == [(True, "adminForm"), (True, "adminForm"),
                                   (False, "adminForm")]


def test_select_all_marks_every_row(make_surface):
    surface = make_surface(4, select_all=True)
    controller = GridSelectionController(surface.document)

    controller.toggle_by_select_all(True)
    assert all(GridSelectionController.is_row_selected(row) for row in surface.rows)
    # Only the markers change; the boxes are left to the toggle's own behavior
    assert not any(box.isChecked() for box in surface.boxes)

    controller.toggle_by_select_all(False)
    assert not any(GridSelectionController.is_row_selected(row) for row in surface.rows)


def test_select_all_toggle_click_is_wired(make_surface):
    surface = make_surface(3, select_all=True)
    GridSelectionController(surface.document)

    surface.toggle.click()

    assert surface.toggle.isChecked()
    assert all(GridSelectionController.is_row_selected(row) for row in surface.rows)


def test_misaligned_row_is_a_no_op(make_surface, notifications):
    surface = make_surface(3, box_count=2)
    controller = GridSelectionController(surface.document, notifier=notifications)

    assert controller.bindings[2].checkbox is None
    controller.on_row_activated(surface.rows[2], surface.titles[2])

    assert [box.isChecked() for box in surface.boxes] == [False, False]
    assert not any(GridSelectionController.is_row_selected(row) for row in surface.rows)
    assert notifications.calls == []


def test_initially_checked_box_marks_row(make_surface, notifications):
    surface = make_surface(3, checked=(1,))

    GridSelectionController(surface.document, notifier=notifications)

    assert GridSelectionController.is_row_selected(surface.rows[1])
    assert not GridSelectionController.is_row_selected(surface.rows[0])
    assert not GridSelectionController.is_row_selected(surface.rows[2])
    assert notifications.calls == [(True, "adminForm")]


def test_shift_click_restores_text_selection(make_surface):
    surface = make_surface(5, select_all=True)
    seen_flags = []

    def notifier(checked, container_id):
        seen_flags.append(surface.heading.textInteractionFlags())
        calls.append((checked, container_id))

    calls = []
    controller = GridSelectionController(surface.document, notifier=notifier)
    assert not controller.boxes[4].isChecked()

    controller.on_row_activated(surface.rows[3], surface.titles[3], shift_held=True)

    assert controller.boxes[4].isChecked()
    assert GridSelectionController.is_row_selected(surface.rows[3])
    assert calls == [(True, "adminForm")]
    # Suspended while the row was toggled, back afterwards
    assert not (seen_flags[0] & SELECTABLE)
    assert surface.heading.textInteractionFlags() & SELECTABLE


def test_mouse_click_on_row_cell_toggles(qtbot, make_surface, notifications):
    surface = make_surface(2)
    controller = GridSelectionController(surface.document, notifier=notifications)
    with qtbot.waitExposed(surface.document):
        surface.document.show()

    qtbot.mouseClick(surface.titles[1], Qt.MouseButton.LeftButton)

    assert surface.boxes[1].isChecked()
    assert controller.selected_indexes() == [1]
    assert notifications.calls == [(True, "adminForm")]


def test_missing_container_is_inert(make_surface, notifications):
    surface = make_surface(2)
    controller = GridSelectionController(surface.document, form_name="otherForm",
                                         notifier=notifications)

    assert controller.container is None
    assert controller.container_id is None
    assert controller.bindings == []

    controller.on_row_activated(surface.rows[0])
    controller.toggle_by_select_all(True)
    assert not surface.boxes[0].isChecked()
    assert not GridSelectionController.is_row_selected(surface.rows[0])
    assert notifications.calls == []


def test_no_checkboxes_is_a_no_op(make_surface, notifications):
    surface = make_surface(2, box_count=0)
    controller = GridSelectionController(surface.document, notifier=notifications)

    controller.on_row_activated(surface.rows[0])

    assert controller.boxes == []
    assert notifications.calls == []


def test_untracked_row_is_ignored(make_surface, notifications):
    surface = make_surface(2)
    controller = GridSelectionController(surface.document, notifier=notifications)

    controller.on_row_activated(QWidget())

    assert notifications.calls == []


def test_document_can_be_the_container(make_surface, notifications):
    surface = make_surface(2)
    controller = GridSelectionController(surface.form, form_name="adminForm",
                                         notifier=notifications)

    assert controller.container is surface.form
    controller.on_row_activated(surface.rows[0])
    assert notifications.calls == [(True, "adminForm")]


def test_unbind_detaches_controller(make_surface, notifications):
    surface = make_surface(2, select_all=True)
    controller = GridSelectionController(surface.document, notifier=notifications)

    controller.unbind()
    surface.boxes[0].click()
    surface.toggle.click()

    assert controller.bindings == []
    assert not GridSelectionController.is_row_selected(surface.rows[0])
    assert not GridSelectionController.is_row_selected(surface.rows[1])


def test_text_selection_guard_restores_on_error(make_surface):
    surface = make_surface(1)

    with pytest.raises(RuntimeError):
        with TextSelectionGuard(surface.document):
            assert not (surface.heading.textInteractionFlags() & SELECTABLE)
            raise RuntimeError("boom")

    assert surface.heading.textInteractionFlags() & SELECTABLE


def send_mouse(widget, event_type, pos=None):
    """Deliver one left-button mouse event the way Qt routes it"""
    pos = QPointF(widget.rect().center()) if pos is None else pos
    buttons = (Qt.MouseButton.NoButton if event_type == QEvent.Type.MouseButtonRelease
               else Qt.MouseButton.LeftButton)
    event = QMouseEvent(event_type, pos, widget.mapToGlobal(pos), Qt.MouseButton.LeftButton,
                        buttons, Qt.KeyboardModifier.NoModifier)
    QApplication.sendEvent(widget, event)


@pytest.fixture
def shown_surface(qtbot, make_surface):
    def build(*args, **kwargs):
        surface = make_surface(*args, **kwargs)
        with qtbot.waitExposed(surface.document):
            surface.document.show()
        return surface
    return build


def test_press_alone_does_not_toggle(shown_surface, notifications):
    surface = shown_surface(2)
    GridSelectionController(surface.document, notifier=notifications)

    send_mouse(surface.titles[1], QEvent.Type.MouseButtonPress)
    assert not surface.boxes[1].isChecked()

    send_mouse(surface.titles[1], QEvent.Type.MouseButtonRelease)
    assert surface.boxes[1].isChecked()
    assert notifications.calls == [(True, "adminForm")]


def test_double_click_on_cell_toggles_twice(shown_surface, notifications):
    surface = shown_surface(2)
    controller = GridSelectionController(surface.document, notifier=notifications)

    for event_type in (QEvent.Type.MouseButtonPress, QEvent.Type.MouseButtonRelease,
                       QEvent.Type.MouseButtonDblClick, QEvent.Type.MouseButtonRelease):
        send_mouse(surface.titles[1], event_type)

    # Two clicks, same as double-clicking the checkbox itself
    assert not surface.boxes[1].isChecked()
    assert not GridSelectionController.is_row_selected(surface.rows[1])
    assert controller.selected_indexes() == []
    assert notifications.calls == [(True, "adminForm"), (False, "adminForm")]


def test_release_dragged_off_row_does_not_toggle(shown_surface, notifications):
    surface = shown_surface(2)
    GridSelectionController(surface.document, notifier=notifications)

    send_mouse(surface.titles[0], QEvent.Type.MouseButtonPress)
    send_mouse(surface.titles[0], QEvent.Type.MouseButtonRelease, QPointF(-500, -500))

    assert not surface.boxes[0].isChecked()
    assert notifications.calls == []


def test_plain_text_cell_with_markup_toggles(make_surface, notifications):
    surface = make_surface(1)
    cell = QLabel("User <a href='x'>admin</a> logged in", surface.rows[0])
    cell.setTextFormat(Qt.TextFormat.PlainText)
    controller = GridSelectionController(surface.document, notifier=notifications)

    controller.on_row_activated(surface.rows[0], cell)

    assert controller.selected_indexes() == [0]
    assert notifications.calls == [(True, "adminForm")]


def test_label_opening_external_links_is_interactive(make_surface, notifications):
    surface = make_surface(1)
    cell = QLabel("https://example.org", surface.rows[0])
    cell.setOpenExternalLinks(True)
    controller = GridSelectionController(surface.document, notifier=notifications)

    controller.on_row_activated(surface.rows[0], cell)

    assert controller.selected_indexes() == []
