"""
UI Widgets Package

Reusable admin grid components for AdminView.
"""
from .admin_grid import AdminGrid, LinkCell
from .grid_selection import GridSelectionController, RowBinding, TextSelectionGuard
from .selection_counter import SelectionCounter

__all__ = [
    'AdminGrid',
    'GridSelectionController',
    'LinkCell',
    'RowBinding',
    'SelectionCounter',
    'TextSelectionGuard',
]
