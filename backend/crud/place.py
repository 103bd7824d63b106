import logging
import re
from dataclasses import dataclass
from typing import Optional, Union

from crud.region import resolve_place_location
from errors import NotFound, ValidationError
from hierarchy import HierarchyResolver
from models.place import Bar, Bookstore, Cafe, PlaceMixin
from models.station import Station
from schemas.place import PlaceWrite
from schemas.station import StationUsage
from sqlalchemy import or_
from sqlalchemy.orm import Session

log = logging.getLogger(__name__)

WALKING_TIME_MIN = 1
WALKING_TIME_MAX = 60
WALKING_TIME_MAX_LENGTH = 10  # walking_time カラムの String(10)
WALKING_TIME_ERROR = (
    f"徒歩時間は{WALKING_TIME_MIN}〜{WALKING_TIME_MAX}分の整数で入力してください"
)
_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class PlaceKind:
    """場所の種類（URLのパス名・モデル・表示名）"""

    key: str
    model: type[PlaceMixin]
    label: str


CAFES = PlaceKind("cafes", Cafe, "喫茶店")
BOOKSTORES = PlaceKind("bookstores", Bookstore, "本屋")
BARS = PlaceKind("bars", Bar, "バー")

PLACE_KINDS: tuple[PlaceKind, ...] = (CAFES, BOOKSTORES, BARS)


# ============================================
# バリデーション
# ============================================
def validate_walking_time(value: Optional[Union[str, int]]) -> Optional[str]:
    """徒歩時間を検証し、保存する文字列を返す

    空文字・Noneは未指定扱い。指定がある場合は1〜60の整数でなければならない。
    前後の空白は取り除くが、数字の表記はそのまま保存する（"05"を"5"にはしない）。

    Raises:
        ValidationError: 整数でない、範囲外、またはカラム長を超える
    """
    if value is None:
        return None
    # boolはintのサブクラスなので先に弾く
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValidationError(WALKING_TIME_ERROR)
    stripped = str(value).strip()
    if not stripped:
        return None
    if (
        len(stripped) > WALKING_TIME_MAX_LENGTH
        or not _DIGITS.fullmatch(stripped)
        or not (WALKING_TIME_MIN <= int(stripped) <= WALKING_TIME_MAX)
    ):
        raise ValidationError(WALKING_TIME_ERROR)
    return stripped


def _validate_place(payload: PlaceWrite) -> tuple[str, str, str, Optional[str]]:
    name = (payload.name or "").strip()
    google_maps_url = (payload.google_maps_url or "").strip()
    station = (payload.station or "").strip()
    if not name or not google_maps_url or not station:
        raise ValidationError("名前、Google Maps URL、最寄り駅は必須です")
    walking_time = validate_walking_time(payload.walking_time)
    return name, google_maps_url, station, walking_time


def _find_station_id(db: Session, station: str) -> Optional[int]:
    return db.query(Station.id).filter(Station.name == station).scalar()


# ============================================
# Place CRUD - Read
# ============================================
def get_places(
    db: Session, kind: PlaceKind, station: Optional[str] = None
) -> list[PlaceMixin]:
    """場所一覧を新しい順で取得

    Args:
        db: DBセッション
        kind: 場所の種類
        station: 駅名でフィルタ（完全一致）

    Returns:
        場所のリスト
    """
    model = kind.model
    query = db.query(model)
    # 書き込み時と同じく前後の空白を無視する
    station = (station or "").strip()
    if station:
        query = query.filter(model.station == station)
    return query.order_by(model.created_at.desc(), model.id.desc()).all()


def get_place(db: Session, kind: PlaceKind, place_id: int) -> PlaceMixin:
    """IDで場所を取得

    Raises:
        NotFound: 場所が見つからない
    """
    place = db.get(kind.model, place_id)
    if not place:
        raise NotFound(f"{kind.label}が見つかりません")
    return place


# ============================================
# Place CRUD - Create / Update / Delete
# ============================================
def create_place(
    db: Session, kind: PlaceKind, payload: PlaceWrite, resolver: HierarchyResolver
) -> PlaceMixin:
    """新規の場所を作成

    locationは駅名から導出し、同名の駅が登録されていればstation_idを紐付ける。

    Raises:
        ValidationError: 必須項目の欠落、徒歩時間が不正
    """
    name, google_maps_url, station, walking_time = _validate_place(payload)

    db_place = kind.model(
        name=name,
        google_maps_url=google_maps_url,
        station=station,
        station_id=_find_station_id(db, station),
        location=resolve_place_location(db, station, resolver),
        walking_time=walking_time,
    )
    db.add(db_place)
    db.commit()
    db.refresh(db_place)

    log.info(f"Created {kind.key} id={db_place.id} station={station}")
    return db_place


def update_place(
    db: Session,
    kind: PlaceKind,
    place_id: int,
    payload: PlaceWrite,
    resolver: HierarchyResolver,
) -> PlaceMixin:
    """場所を更新（全項目を置き換え、locationは再導出）

    Raises:
        ValidationError: 必須項目の欠落、徒歩時間が不正
        NotFound: 場所が見つからない
    """
    name, google_maps_url, station, walking_time = _validate_place(payload)
    db_place = get_place(db, kind, place_id)

    db_place.name = name
    db_place.google_maps_url = google_maps_url
    db_place.station = station
    db_place.station_id = _find_station_id(db, station)
    db_place.location = resolve_place_location(db, station, resolver)
    db_place.walking_time = walking_time

    db.commit()
    db.refresh(db_place)

    log.info(f"Updated {kind.key} id={place_id}")
    return db_place


def delete_place(db: Session, kind: PlaceKind, place_id: int) -> str:
    """場所を削除し、確認メッセージを返す

    Raises:
        NotFound: 場所が見つからない
    """
    db_place = get_place(db, kind, place_id)
    db.delete(db_place)
    db.commit()

    log.info(f"Deleted {kind.key} id={place_id}")
    return f"{kind.label}を削除しました"


# ============================================
# 駅との関連
# ============================================
def _references(model: type[PlaceMixin], station: Station):
    return or_(model.station == station.name, model.station_id == station.id)


def count_station_usage(db: Session, station: Station) -> StationUsage:
    """駅を参照している場所の件数を種類ごとに数える"""
    counts = {
        kind.key: db.query(kind.model).filter(_references(kind.model, station)).count()
        for kind in PLACE_KINDS
    }
    return StationUsage(**counts)


def sync_places_with_station(
    db: Session,
    station: Station,
    resolver: HierarchyResolver,
    old_name: Optional[str] = None,
) -> int:
    """駅の登録・改名を、その駅を参照する場所に反映

    station_idまたは駅名（改名前の名前を含む）で参照している場所の
    station・station_id・locationを更新する。commitは呼び出し側で行う。

    Returns:
        更新した場所の件数
    """
    location = resolve_place_location(db, station.name, resolver)
    names = {station.name}
    if old_name:
        names.add(old_name)

    updated = 0
    for kind in PLACE_KINDS:
        model = kind.model
        updated += (
            db.query(model)
            .filter(or_(model.station.in_(names), model.station_id == station.id))
            .update(
                {
                    model.station: station.name,
                    model.station_id: station.id,
                    model.location: location,
                },
                synchronize_session=False,
            )
        )
    return updated
