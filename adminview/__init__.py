"""
AdminView - administrator dashboard widgets with row-click multi-select grids
"""

__version__ = "1.0.0"
