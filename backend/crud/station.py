import logging
from typing import Optional

from crud.place import count_station_usage, sync_places_with_station
from crud.region import resolve_prefecture_id
from errors import Conflict, DuplicateKey, NotFound, ValidationError
from hierarchy import HierarchyResolver
from models.region import Prefecture, Region
from models.station import Station
from schemas.station import StationDetail, StationWrite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

log = logging.getLogger(__name__)


# ============================================
# Station CRUD - Read
# ============================================
def get_station_names(db: Session, prefecture_id: Optional[int] = None) -> list[str]:
    """駅名一覧を名前順で取得

    Args:
        db: DBセッション
        prefecture_id: 都道府県IDでフィルタ

    Returns:
        駅名のリスト
    """
    query = db.query(Station.name)
    if prefecture_id is not None:
        query = query.filter(Station.prefecture_id == prefecture_id)
    return [name for (name,) in query.order_by(Station.name).all()]


def get_stations_detailed(db: Session) -> list[StationDetail]:
    """管理画面用: 都道府県名・地方名付きの駅一覧を新しい順で取得"""
    rows = (
        db.query(Station, Prefecture.name, Region.id, Region.name)
        .outerjoin(Prefecture, Station.prefecture_id == Prefecture.id)
        .outerjoin(Region, Prefecture.region_id == Region.id)
        .order_by(Station.created_at.desc(), Station.id.desc())
        .all()
    )
    return [
        StationDetail(
            id=station.id,
            name=station.name,
            location=station.location,
            prefecture_id=station.prefecture_id,
            created_at=station.created_at,
            prefecture_name=prefecture_name,
            region_id=region_id,
            region_name=region_name,
        )
        for station, prefecture_name, region_id, region_name in rows
    ]


def get_station(db: Session, station_id: int) -> Station:
    """IDで駅を取得

    Raises:
        NotFound: 駅が見つからない
    """
    station = db.get(Station, station_id)
    if not station:
        raise NotFound("駅が見つかりません")
    return station


def get_station_by_name(db: Session, name: str) -> Optional[Station]:
    return db.query(Station).filter(Station.name == name).first()


# ============================================
# Station CRUD - Create / Update
# ============================================
def _validate_station(
    db: Session, payload: StationWrite, resolver: HierarchyResolver
) -> tuple[str, str, Optional[int]]:
    """必須項目を検証し、(name, location, prefecture_id) を返す

    prefecture_idが省略されていればlocationから推測する。
    """
    name = (payload.name or "").strip()
    location = (payload.location or "").strip()
    if not name or not location:
        raise ValidationError("駅名と所在地は必須です")

    if payload.prefecture_id is None:
        prefecture_id = resolve_prefecture_id(db, location, resolver)
    else:
        if db.get(Prefecture, payload.prefecture_id) is None:
            raise ValidationError("指定された都道府県が存在しません")
        prefecture_id = payload.prefecture_id
    return name, location, prefecture_id


def _commit_station(db: Session, station: Station) -> Station:
    # 事前チェックをすり抜けた重複はDBの一意制約で検出される
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateKey()
    db.refresh(station)
    return station


def create_station(
    db: Session, payload: StationWrite, resolver: HierarchyResolver
) -> Station:
    """新規の駅を作成

    同名の駅名で登録済みの場所があれば、その場所にも紐付ける。

    Raises:
        ValidationError: 駅名・所在地の欠落、存在しない都道府県
        DuplicateKey: 駅名が重複
    """
    name, location, prefecture_id = _validate_station(db, payload, resolver)

    # 駅名の重複チェック
    if get_station_by_name(db, name):
        raise DuplicateKey()

    db_station = Station(name=name, location=location, prefecture_id=prefecture_id)
    db.add(db_station)
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        raise DuplicateKey()

    linked = sync_places_with_station(db, db_station, resolver)
    _commit_station(db, db_station)

    log.info(
        f"Created station id={db_station.id} name={name} "
        f"prefecture_id={prefecture_id} linked_places={linked}"
    )
    return db_station


def update_station(
    db: Session, station_id: int, payload: StationWrite, resolver: HierarchyResolver
) -> Station:
    """駅を更新

    駅名が変わった場合は、参照している場所の駅名と所在地も更新する。

    Raises:
        ValidationError: 駅名・所在地の欠落、存在しない都道府県
        NotFound: 駅が見つからない
        DuplicateKey: 駅名が他の駅と重複
    """
    name, location, prefecture_id = _validate_station(db, payload, resolver)
    db_station = get_station(db, station_id)

    duplicate = get_station_by_name(db, name)
    if duplicate and duplicate.id != station_id:
        raise DuplicateKey()

    old_name = db_station.name
    db_station.name = name
    db_station.location = location
    db_station.prefecture_id = prefecture_id
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        raise DuplicateKey()

    synced = sync_places_with_station(db, db_station, resolver, old_name=old_name)
    _commit_station(db, db_station)

    log.info(f"Updated station id={station_id} name={name} synced_places={synced}")
    return db_station


# ============================================
# Station CRUD - Delete
# ============================================
def delete_station(db: Session, station_id: int) -> None:
    """駅を削除

    喫茶店・本屋・バーのいずれかから参照されている駅は削除できない。

    Raises:
        NotFound: 駅が見つからない
        Conflict: 場所から参照されている
    """
    db_station = get_station(db, station_id)

    usage = count_station_usage(db, db_station)
    if usage.total > 0:
        log.info(f"Refused to delete station id={station_id}: {usage.model_dump()}")
        raise Conflict(usage.model_dump())

    name = db_station.name
    db.delete(db_station)
    db.commit()

    log.info(f"Deleted station id={station_id} name={name}")
