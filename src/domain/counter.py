"""Counter Domain Entity

Named monotonically increasing sequences (e.g. invoice numbers per year).
"""

from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, Integer, String
from src.domain.base import BaseModel, BigIntegerPK


class Counter(BaseModel, table=True):
    """
    Counter - One row per sequence key

    Domain Rules:
    - key is unique (e.g. 'invoice-2025')
    - seq is never negative
    - Created lazily on first increment (first value returned is 1)
    - Only mutated through an atomic increment-and-return
    """

    __tablename__ = "counters"
    __table_args__ = (
        CheckConstraint("seq >= 0", name="seq_non_negative"),
    )

    id: int = Field(
        sa_column=Column(BigIntegerPK, primary_key=True, autoincrement=True),
        description="Unique counter identifier (auto-increment)"
    )

    key: str = Field(
        sa_column=Column(String(100), nullable=False, unique=True),
        description="Sequence key (e.g., invoice-2025)"
    )

    seq: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Last value handed out for this key"
    )
