from datetime import datetime

from database import Base
from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column


class PlaceMixin:
    """喫茶店・本屋・バーで共通のカラム

    stationは駅名のコピー（表示用）、station_idは同名の駅が登録されていれば
    その駅を指す。locationは駅名からサーバー側で導出する。
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    station: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    google_maps_url: Mapped[str] = mapped_column(Text, nullable=False)
    walking_time: Mapped[str | None] = mapped_column(String(10), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, nullable=False, index=True
    )

    @declared_attr
    def station_id(cls) -> Mapped[int | None]:
        return mapped_column(
            Integer, ForeignKey("stations.id"), nullable=True, index=True
        )


class Cafe(PlaceMixin, Base):
    """Cafe model - 喫茶店"""

    __tablename__ = "cafes"


class Bookstore(PlaceMixin, Base):
    """Bookstore model - 本屋"""

    __tablename__ = "bookstores"


class Bar(PlaceMixin, Base):
    """Bar model - バー"""

    __tablename__ = "bars"
