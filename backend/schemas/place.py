from datetime import datetime
from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, StrictStr


class PlaceWrite(BaseModel):
    """場所（喫茶店・本屋・バー）の作成・更新時のスキーマ

    フロントエンドはcamelCase（googleMapsUrl, walkingTime）で送ってくるが、
    snake_caseも受け付ける。locationは送られてきても無視する。
    walkingTimeは文字列か整数のみ受け付ける（true や 5.0 は型エラー）。
    """

    name: Optional[str] = None
    google_maps_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("googleMapsUrl", "google_maps_url"),
    )
    station: Optional[str] = None
    walking_time: Optional[Union[StrictStr, StrictInt]] = Field(
        default=None,
        validation_alias=AliasChoices("walkingTime", "walking_time"),
    )


class Place(BaseModel):
    """場所のAPI応答スキーマ"""

    id: int
    name: str
    location: str
    station: str
    station_id: Optional[int] = None
    google_maps_url: str
    walking_time: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DeleteResult(BaseModel):
    """削除APIの応答"""

    message: str
    id: int
