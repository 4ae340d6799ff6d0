"""
Models package for AdminView data structures
"""

from adminview.models.action_log import ActionLog
from adminview.models.category import Category, CategoryItem

__all__ = ['ActionLog', 'Category', 'CategoryItem']
