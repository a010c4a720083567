"""Named sequence counters.

Short ids are drawn from a row in this table, incremented inside the same
transaction that inserts the record it numbers.
"""
from sqlmodel import Field, SQLModel


class Counter(SQLModel, table=True):
    """Last value handed out for a named sequence."""

    __tablename__ = "counters"

    name: str = Field(primary_key=True, max_length=64)
    value: int = Field(default=0)
