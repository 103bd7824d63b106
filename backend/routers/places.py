from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

import crud
import schemas
from auth import require_admin
from crud.place import PLACE_KINDS, PlaceKind
from database import get_db
from hierarchy import HierarchyResolver, get_resolver


def build_router(kind: PlaceKind) -> APIRouter:
    """喫茶店・本屋・バーで共通のCRUDルーターを作成"""
    router = APIRouter(
        prefix=f"/api/{kind.key}",
        tags=[kind.key],
    )

    @router.get("", response_model=list[schemas.Place], name=f"list_{kind.key}")
    def list_places(station: Optional[str] = None, db: Session = Depends(get_db)):
        """場所一覧を取得（駅名で完全一致フィルタ、新しい順）"""
        return crud.get_places(db, kind, station=station)

    @router.get("/all", response_model=list[schemas.Place], name=f"list_all_{kind.key}")
    def list_all_places(db: Session = Depends(get_db)):
        """管理画面用: 全件を新しい順で取得"""
        return crud.get_places(db, kind)

    @router.get("/{place_id}", response_model=schemas.Place, name=f"get_{kind.key}")
    def get_place(place_id: int, db: Session = Depends(get_db)):
        """指定されたIDの場所を取得"""
        return crud.get_place(db, kind, place_id)

    @router.post(
        "",
        response_model=schemas.Place,
        status_code=status.HTTP_201_CREATED,
        dependencies=[Depends(require_admin)],
        name=f"create_{kind.key}",
    )
    def create_place(
        place: schemas.PlaceWrite,
        db: Session = Depends(get_db),
        resolver: HierarchyResolver = Depends(get_resolver),
    ):
        """新規の場所を作成"""
        return crud.create_place(db, kind, place, resolver)

    @router.put(
        "/{place_id}",
        response_model=schemas.Place,
        dependencies=[Depends(require_admin)],
        name=f"update_{kind.key}",
    )
    def update_place(
        place_id: int,
        place: schemas.PlaceWrite,
        db: Session = Depends(get_db),
        resolver: HierarchyResolver = Depends(get_resolver),
    ):
        """場所を更新"""
        return crud.update_place(db, kind, place_id, place, resolver)

    @router.delete(
        "/{place_id}",
        response_model=schemas.DeleteResult,
        dependencies=[Depends(require_admin)],
        name=f"delete_{kind.key}",
    )
    def delete_place(place_id: int, db: Session = Depends(get_db)):
        """場所を削除"""
        message = crud.delete_place(db, kind, place_id)
        return schemas.DeleteResult(message=message, id=place_id)

    return router


routers = [build_router(kind) for kind in PLACE_KINDS]
