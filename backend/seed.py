"""テーブル作成と、地方・都道府県・駅データの投入

何度実行しても同じ結果になる（既存データは上書きしない）。
"""

import logging
from dataclasses import dataclass

from database import Base
from hierarchy import HierarchyResolver, resolver as default_resolver
from models import Bar, Bookstore, Cafe, Prefecture, Region, Station
from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

log = logging.getLogger(__name__)


@dataclass
class SeedResult:
    regions_inserted: int = 0
    prefectures_inserted: int = 0
    stations_inserted: int = 0
    stations_updated: int = 0


def seed_regions(db: Session, resolver: HierarchyResolver = default_resolver) -> int:
    """地方データを投入（テーブルが空の場合のみ）"""
    if db.query(func.count(Region.id)).scalar():
        log.info("ℹ️  地方データは既に存在します")
        return 0
    for region in resolver.regions:
        db.add(Region(id=region.id, name=region.name, code=region.code))
    db.commit()
    log.info(f"✅ {len(resolver.regions)}件の地方データを投入しました")
    return len(resolver.regions)


def seed_prefectures(
    db: Session, resolver: HierarchyResolver = default_resolver
) -> int:
    """都道府県データを投入（テーブルが空の場合のみ）"""
    if db.query(func.count(Prefecture.id)).scalar():
        log.info("ℹ️  都道府県データは既に存在します")
        return 0
    for prefecture in resolver.prefectures:
        db.add(
            Prefecture(
                id=prefecture.id,
                name=prefecture.name,
                code=prefecture.code,
                region_id=prefecture.region_id,
            )
        )
    db.commit()
    log.info(f"✅ {len(resolver.prefectures)}件の都道府県データを投入しました")
    return len(resolver.prefectures)


def seed_stations(
    db: Session, resolver: HierarchyResolver = default_resolver
) -> tuple[int, int]:
    """駅データを投入

    未登録の駅は追加し、登録済みで都道府県が未設定の駅は
    都道府県と所在地を埋める。

    Returns:
        (追加件数, 更新件数)
    """
    prefecture_ids = {
        name: id_ for id_, name in db.query(Prefecture.id, Prefecture.name).all()
    }
    inserted = 0
    updated = 0
    for station in resolver.stations:
        prefecture_id = prefecture_ids.get(station.prefecture_name)
        if prefecture_id is None:
            log.warning(
                f"⚠️  都道府県が見つかりません: {station.prefecture_name} (駅: {station.name})"
            )
            continue

        existing = db.query(Station).filter(Station.name == station.name).first()
        if existing is None:
            db.add(
                Station(
                    name=station.name,
                    location=station.location,
                    prefecture_id=prefecture_id,
                )
            )
            inserted += 1
        elif existing.prefecture_id is None:
            existing.prefecture_id = prefecture_id
            existing.location = station.location
            updated += 1
    db.commit()

    log.info(f"✅ {inserted}件の駅を新規追加しました")
    log.info(f"✅ {updated}件の駅を更新しました")
    return inserted, updated


def seed_all(db: Session, resolver: HierarchyResolver = default_resolver) -> SeedResult:
    result = SeedResult()
    result.regions_inserted = seed_regions(db, resolver)
    result.prefectures_inserted = seed_prefectures(db, resolver)
    result.stations_inserted, result.stations_updated = seed_stations(db, resolver)
    return result


def init_db(engine: Engine, resolver: HierarchyResolver = default_resolver) -> SeedResult:
    """テーブルを作成してマスタデータを投入"""
    log.info("📋 テーブルを作成中...")
    Base.metadata.create_all(bind=engine)
    with Session(engine) as db:
        return seed_all(db, resolver)


def table_counts(db: Session) -> dict[str, int]:
    """テーブルごとの件数"""
    return {
        model.__tablename__: db.query(func.count(model.id)).scalar() or 0
        for model in (Region, Prefecture, Station, Cafe, Bookstore, Bar)
    }
