import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import crud
import schemas
from auth import require_admin
from database import get_db
from hierarchy import HierarchyResolver, get_resolver

log = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/stations",
    tags=["stations"],
)


@router.get("", response_model=list[str])
def list_station_names(
    prefecture_id: Optional[int] = None,
    db: Session = Depends(get_db),
    resolver: HierarchyResolver = Depends(get_resolver),
):
    """駅名一覧を取得（プルダウン用、名前順）"""
    try:
        return crud.get_station_names(db, prefecture_id=prefecture_id)
    except SQLAlchemyError as e:
        log.warning(f"Falling back to static station names: {e}")
        return resolver.station_names(prefecture_id)


@router.get("/all", response_model=list[schemas.StationDetail])
def list_stations_detailed(db: Session = Depends(get_db)):
    """管理画面用: 都道府県名・地方名付きの駅一覧"""
    return crud.get_stations_detailed(db)


@router.get("/{station_id}", response_model=schemas.Station)
def get_station(station_id: int, db: Session = Depends(get_db)):
    """指定されたIDの駅を取得"""
    return crud.get_station(db, station_id)


@router.post(
    "",
    response_model=schemas.Station,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_station(
    station: schemas.StationWrite,
    db: Session = Depends(get_db),
    resolver: HierarchyResolver = Depends(get_resolver),
):
    """新規の駅を作成"""
    return crud.create_station(db, station, resolver)


@router.put(
    "/{station_id}",
    response_model=schemas.Station,
    dependencies=[Depends(require_admin)],
)
def update_station(
    station_id: int,
    station: schemas.StationWrite,
    db: Session = Depends(get_db),
    resolver: HierarchyResolver = Depends(get_resolver),
):
    """駅を更新"""
    return crud.update_station(db, station_id, station, resolver)


@router.delete(
    "/{station_id}",
    response_model=schemas.DeleteResult,
    dependencies=[Depends(require_admin)],
)
def delete_station(station_id: int, db: Session = Depends(get_db)):
    """駅を削除（場所から参照されている場合は400）"""
    crud.delete_station(db, station_id)
    return schemas.DeleteResult(message="駅を削除しました", id=station_id)
