#!/usr/bin/env python3
"""
データベース初期化・データ投入スクリプト

テーブルを作成し、地方・都道府県・主要駅のデータを投入する。
既存データは上書きしないので何度実行してもよい。

Usage:
    python backend/scripts/seed_database.py
"""

import sys
from pathlib import Path

# backendディレクトリをパスに追加
sys.path.append(str(Path(__file__).parent.parent))

from database import SessionLocal, engine
from seed import init_db, table_counts


def main():
    """メイン関数"""
    try:
        print("🌱 データベースの初期化を開始します...")

        result = init_db(engine)
        print(f"✅ 地方: {result.regions_inserted}件 投入")
        print(f"✅ 都道府県: {result.prefectures_inserted}件 投入")
        print(f"✅ 駅: {result.stations_inserted}件 追加 / {result.stations_updated}件 更新")

        print("\n📊 データベース統計:")
        with SessionLocal() as db:
            for table, count in table_counts(db).items():
                print(f"   {table}: {count}件")

        print("\n🎉 データベースの初期化が完了しました！")

    except Exception as e:
        print(f"\n❌ データベースの初期化でエラーが発生しました: {e}")
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
