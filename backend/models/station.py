from datetime import datetime
from typing import Optional

from database import Base
from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.region import Prefecture


class Station(Base):
    """Station model - 駅（場所の最寄り駅として参照される）"""

    __tablename__ = "stations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(
        String(255), unique=True, index=True, nullable=False
    )
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    prefecture_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("prefectures.id"), nullable=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, nullable=False
    )

    # リレーションシップ
    prefecture: Mapped[Optional[Prefecture]] = relationship(
        "Prefecture", back_populates="stations"
    )
