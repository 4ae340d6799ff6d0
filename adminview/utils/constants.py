"""Constants used throughout AdminView"""


class GridNames:
    """Object name conventions the grid selection controller discovers"""
    DEFAULT_FORM = "adminForm"
    CHECKALL_TOGGLE = "checkall-toggle"
    ROW_PATTERN = r"^row"           # row0 / row1 alternate, like striped tables
    CHECKBOX_PREFIX = "cb"


class GridProperties:
    """Dynamic properties used as stylesheet selectors"""
    ROW_SELECTED = "rowSelected"


class PageOptionKeys:
    """Keys of the page-level options store"""
    MULTISELECT = "js-multiselect"
    FORM_NAME = "formName"


class ActionLogQuery:
    """Defaults for the latest actions listing"""
    DEFAULT_COUNT = 5
    ORDERING = "id"
    DIRECTION = "DESC"



class SiteNamePosition:
    """Where the site name goes in a window title"""
    NONE = 0
    BEFORE = 1
    AFTER = 2


PAGE_TITLE_FORMAT = "{0} - {1}"
