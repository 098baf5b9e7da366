import datetime as dt

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def utcnow() -> dt.datetime:
    """Naive UTC timestamp, matching the ``DateTime`` columns."""
    return dt.datetime.now(dt.UTC).replace(tzinfo=None)
