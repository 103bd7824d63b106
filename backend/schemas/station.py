from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class StationWrite(BaseModel):
    """駅の作成・更新時のスキーマ

    必須チェックはcrud側で行うため、ここではすべてオプショナル。
    prefecture_idを省略するとlocationから推測する。
    """

    name: Optional[str] = None
    location: Optional[str] = None
    prefecture_id: Optional[int] = None


class Station(BaseModel):
    """駅のAPI応答スキーマ"""

    id: int
    name: str
    location: str
    prefecture_id: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class StationDetail(Station):
    """管理画面用: 都道府県名・地方名を結合した駅情報"""

    prefecture_name: Optional[str] = None
    region_id: Optional[int] = None
    region_name: Optional[str] = None


class StationUsage(BaseModel):
    """駅を参照している場所の件数"""

    cafes: int = 0
    bookstores: int = 0
    bars: int = 0

    @property
    def total(self) -> int:
        return self.cafes + self.bookstores + self.bars
