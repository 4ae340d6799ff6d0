"""Tests for the checked-row counter"""

from PyQt6.QtWidgets import QCheckBox

from adminview.ui.widgets.selection_counter import SelectionCounter


def make_boxes(count):
    return [QCheckBox() for _ in range(count)]


def test_counts_up_and_down(qtbot):
    counter = SelectionCounter()
    counter.bind(make_boxes(3))

    with qtbot.waitSignal(counter.count_changed) as blocker:
        counter.is_checked(True, "adminForm")
    assert blocker.args == [1]

    counter.is_checked(True)
    counter.is_checked(False)
    assert counter.count == 1


def test_never_goes_negative(qtbot):
    counter = SelectionCounter()
    counter.bind(make_boxes(2))

    counter.is_checked(False)
    counter.is_checked(False)

    assert counter.count == 0


def test_toggle_follows_full_selection(qtbot):
    boxes = make_boxes(2)
    toggle = QCheckBox()
    counter = SelectionCounter()
    counter.bind(boxes, toggle)

    counter.is_checked(True)
    assert not toggle.isChecked()
    counter.is_checked(True)
    assert toggle.isChecked()
    counter.is_checked(False)
    assert not toggle.isChecked()


def test_check_all(qtbot):
    boxes = make_boxes(4)
    counter = SelectionCounter()
    counter.bind(boxes)

    counter.check_all(True)
    assert all(box.isChecked() for box in boxes)
    assert counter.count == 4

    counter.check_all(False)
    assert not any(box.isChecked() for box in boxes)
    assert counter.count == 0


def test_bind_starts_over(qtbot):
    counter = SelectionCounter()
    counter.bind(make_boxes(2))
    counter.is_checked(True)

    counter.bind(make_boxes(5))

    assert counter.count == 0
    assert counter.total == 5
