from datetime import datetime
from typing import List

from database import Base
from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship


class Region(Base):
    """Region model - 八地方区分"""

    __tablename__ = "regions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, nullable=False
    )

    # リレーションシップ
    prefectures: Mapped[List["Prefecture"]] = relationship(
        "Prefecture",
        back_populates="region",
        order_by="Prefecture.id",
    )


class Prefecture(Base):
    """Prefecture model - 都道府県"""

    __tablename__ = "prefectures"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    region_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("regions.id"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, nullable=False
    )

    # リレーションシップ
    region: Mapped[Region] = relationship("Region", back_populates="prefectures")
    stations: Mapped[List["Station"]] = relationship(  # noqa: F821
        "Station", back_populates="prefecture"
    )
