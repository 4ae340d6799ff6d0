"""
Action Log Model - one audit-log entry shown on the dashboard
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from dateutil import parser as date_parser


@dataclass
class ActionLog:
    """A recorded administrator action"""
    id: int
    message: str = ""
    log_date: datetime = field(default_factory=datetime.now)
    extension: str = ""
    user_id: Optional[int] = None
    item_id: Optional[int] = None
    ip_address: str = ""

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'message': self.message,
            'log_date': self.log_date.isoformat(),
            'extension': self.extension,
            'user_id': self.user_id,
            'item_id': self.item_id,
            'ip_address': self.ip_address
        }

    @staticmethod
    def parse_log_date(value) -> datetime:
        """
        Normalize a stored log date: ISO-ish strings, epoch seconds or datetimes

        Raises:
            ValueError: If the value is none of those
        """
        if value is None:
            return datetime.now()
        if isinstance(value, datetime):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid log date: {value!r}")
        if isinstance(value, (int, float)):
            try:
                return datetime.fromtimestamp(value)
            except (OverflowError, OSError) as e:
                raise ValueError(f"Invalid log date: {value!r}") from e
        if isinstance(value, str):
            try:
                return date_parser.parse(value)
            except OverflowError as e:
                raise ValueError(f"Invalid log date: {value!r}") from e
        raise ValueError(f"Invalid log date: {value!r}")

    @staticmethod
    def from_dict(data: dict) -> 'ActionLog':
        log_date = ActionLog.parse_log_date(data.get('log_date'))

        return ActionLog(
            id=int(data['id']),
            message=data.get('message', ''),
            log_date=log_date,
            extension=data.get('extension', ''),
            user_id=data.get('user_id'),
            item_id=data.get('item_id'),
            ip_address=data.get('ip_address', '')
        )
