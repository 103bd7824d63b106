from typing import Optional

from fastapi import Header

import config
from errors import Unauthorized


def require_admin(x_admin_token: Optional[str] = Header(default=None)) -> None:
    """更新系APIの管理者チェック

    ADMIN_TOKENが未設定なら誰でも通す（フロントエンドのパスワード画面のみ）。
    """
    if config.ADMIN_TOKEN is None:
        return
    if x_admin_token != config.ADMIN_TOKEN:
        raise Unauthorized()
