"""Action log retrieval for the latest actions dashboard widget"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Protocol, Union

from adminview.models.action_log import ActionLog
from adminview.utils.constants import ActionLogQuery

logger = logging.getLogger(__name__)


class ActionLogSource(Protocol):
    """Anything that can hand back a window of action logs"""

    def get_items(self, start: int, limit: int, ordering: str,
                  direction: str) -> List[ActionLog]:
        ...


class InMemoryActionLogSource:
    """Action log source backed by a plain list"""

    def __init__(self, logs: Iterable[ActionLog] = ()):
        self.logs: List[ActionLog] = list(logs)

    def add(self, log: ActionLog):
        self.logs.append(log)

    def get_items(self, start: int, limit: int, ordering: str = ActionLogQuery.ORDERING,
                  direction: str = ActionLogQuery.DIRECTION) -> List[ActionLog]:
        """
        Return a window of logs sorted on one attribute

        Args:
            start: Offset of the first log to return
            limit: Maximum number of logs; 0 means no limit
            ordering: ActionLog attribute to sort on
            direction: "ASC" or "DESC"
        """
        if ordering not in ActionLog.__dataclass_fields__:
            raise ValueError(f"Unknown ordering column: {ordering}")

        reverse = direction.upper() == "DESC"
        ordered = sorted(self.logs, key=lambda log: getattr(log, ordering), reverse=reverse)
        if limit:
            return ordered[start:start + limit]
        return ordered[start:]


def get_latest_actions(source: ActionLogSource,
                       count: int = ActionLogQuery.DEFAULT_COUNT) -> List[ActionLog]:
    """Get the most recent actions, newest id first"""
    rows = source.get_items(
        start=0,
        limit=count,
        ordering=ActionLogQuery.ORDERING,
        direction=ActionLogQuery.DIRECTION
    )
    logger.debug(f"Loaded {len(rows)} latest actions (count={count})")
    return rows


def load_action_logs(path: Union[str, Path]) -> InMemoryActionLogSource:
    """
    Load action logs from a JSON array file

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is not a JSON array of log objects
    """
    path = Path(path)
    data = json.loads(path.read_text(encoding='utf-8'))
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of action logs in {path}")

    try:
        source = InMemoryActionLogSource(ActionLog.from_dict(item) for item in data)
    except KeyError as e:
        raise ValueError(f"Action log entry in {path} is missing {e}") from e
    except TypeError as e:
        raise ValueError(f"Malformed action log entry in {path}: {e}") from e
    logger.info(f"Loaded {len(source.logs)} action logs from {path}")
    return source
