"""
Category Model - a listing category and the items filed under it
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CategoryItem:
    """An item listed on a category page"""
    id: int
    title: str
    access: int = 1
    author: str = ""


@dataclass
class Category:
    """A category with its view access level"""
    id: int
    title: str
    access: int = 1
    parent_id: Optional[int] = None
    description: str = ""
    children: List['Category'] = field(default_factory=list)
