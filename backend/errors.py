"""APIエラーの種類と、FastAPIへの例外ハンドラ登録"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

log = logging.getLogger(__name__)


class AppError(HTTPException):
    """レスポンスボディを {"error": ...} で返すAPIエラーの基底クラス"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "サーバーエラーが発生しました"

    def __init__(self, message: Optional[str] = None):
        super().__init__(status_code=self.status_code, detail=message or self.message)

    def body(self) -> dict[str, Any]:
        return {"error": self.detail}


class ValidationError(AppError):
    """必須項目の欠落・値の形式不正"""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "入力内容が正しくありません"


class DuplicateKey(AppError):
    """一意制約違反（駅名の重複）"""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "この駅名は既に登録されています"


class Conflict(AppError):
    """参照されているため削除できない"""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "この駅は使用中のため削除できません"

    def __init__(self, usage: dict[str, int], message: Optional[str] = None):
        super().__init__(message)
        self.usage = usage

    def body(self) -> dict[str, Any]:
        return {"error": self.detail, "usage": self.usage}


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "指定されたデータが見つかりません"


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "管理者トークンが正しくありません"


class StoreUnavailable(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "データベースに接続できません"


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc, AppError):
        content = exc.body()
    else:
        content = {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = ValidationError.message
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{message}: {field} {first.get('msg', '')}".strip()
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": message}
    )


async def store_error_handler(request: Request, exc: SQLAlchemyError):
    log.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    if isinstance(exc, OperationalError):
        error = StoreUnavailable()
    else:
        error = AppError()
    return JSONResponse(status_code=error.status_code, content=error.body())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
