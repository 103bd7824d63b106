import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import crud
import schemas
from database import get_db
from hierarchy import HierarchyResolver, get_resolver

log = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["regions"],
)


@router.get("/regions", response_model=list[schemas.Region])
def list_regions(
    db: Session = Depends(get_db),
    resolver: HierarchyResolver = Depends(get_resolver),
):
    """地方一覧を取得（DBに接続できない場合は静的データを返す）"""
    try:
        return crud.get_regions(db)
    except SQLAlchemyError as e:
        log.warning(f"Falling back to static regions: {e}")
        return list(resolver.regions)


@router.get("/prefectures", response_model=list[schemas.Prefecture])
def list_prefectures(
    region_id: Optional[int] = None,
    db: Session = Depends(get_db),
    resolver: HierarchyResolver = Depends(get_resolver),
):
    """都道府県一覧を取得

    Args:
        region_id: 地方IDでフィルタ
    """
    try:
        return crud.get_prefectures(db, region_id=region_id)
    except SQLAlchemyError as e:
        log.warning(f"Falling back to static prefectures: {e}")
        return resolver.prefectures_in_region(region_id)
