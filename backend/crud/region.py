from typing import Optional

from hierarchy import UNKNOWN_LOCATION, HierarchyResolver
from models.region import Prefecture, Region
from models.station import Station
from sqlalchemy.orm import Session


# ============================================
# Region / Prefecture CRUD
# ============================================
def get_regions(db: Session) -> list[Region]:
    """地方一覧をID順で取得"""
    return db.query(Region).order_by(Region.id).all()


def get_prefectures(db: Session, region_id: Optional[int] = None) -> list[Prefecture]:
    """都道府県一覧をID順で取得

    Args:
        db: DBセッション
        region_id: 地方IDでフィルタ

    Returns:
        Prefectureのリスト
    """
    query = db.query(Prefecture)
    if region_id is not None:
        query = query.filter(Prefecture.region_id == region_id)
    return query.order_by(Prefecture.id).all()


def get_prefecture_by_name(db: Session, name: str) -> Optional[Prefecture]:
    return db.query(Prefecture).filter(Prefecture.name == name).first()


# ============================================
# 所在地の解決
# ============================================
def resolve_prefecture_id(
    db: Session, location: str, resolver: HierarchyResolver
) -> Optional[int]:
    """市区町村名から都道府県IDを推測

    静的マッピングで都道府県名を求め、DBに投入済みの都道府県からIDを引く。
    推測できない場合はNone（エラーにはしない）。

    Args:
        db: DBセッション
        location: 市区町村名（例: "新宿区"）
        resolver: 静的データ

    Returns:
        都道府県ID（不明な場合はNone）
    """
    prefecture_name = resolver.prefecture_name_for_location(location)
    if prefecture_name is None:
        return None
    prefecture = get_prefecture_by_name(db, prefecture_name)
    return prefecture.id if prefecture else None


def resolve_place_location(
    db: Session, station: str, resolver: HierarchyResolver
) -> str:
    """駅名から場所の所在地（市区町村名）を導出

    静的マッピングを優先し、載っていない駅は登録済みの駅の所在地を使う。
    どちらにもなければ UNKNOWN_LOCATION。
    """
    location = resolver.location_for_station(station)
    if location:
        return location
    station_row = db.query(Station).filter(Station.name == station.strip()).first()
    if station_row and station_row.location:
        return station_row.location
    return UNKNOWN_LOCATION
