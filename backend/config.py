import os
from pathlib import Path

from dotenv import load_dotenv

# .envファイルを読み込み
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

API_TITLE = "ichidan-dokusho-place API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "読書に集中できる場所をレコメンドするAPI"

# Database connection settings
DATABASE_URL = os.getenv("DATABASE_URL", "postgresql://app:app@db:5432/app")

# CORS設定（カンマ区切り、"*" で全許可）
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# 起動時にテーブル作成とマスタデータ投入を行うか
SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "true").lower() in ("1", "true", "yes")

# 設定されている場合、更新系APIは X-Admin-Token ヘッダーが必須
ADMIN_TOKEN = os.getenv("ADMIN_TOKEN") or None
