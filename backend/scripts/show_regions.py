#!/usr/bin/env python3
"""
静的データ（地方・都道府県）の確認スクリプト（DB不要）

Usage:
    python backend/scripts/show_regions.py
"""

import sys
from pathlib import Path

# backendディレクトリをパスに追加
sys.path.append(str(Path(__file__).parent.parent))

from hierarchy import resolver


def main():
    """メイン関数"""
    print("🌱 静的データの確認")
    print("=" * 60)

    print("\n🗾 地方データ:")
    for region in resolver.regions:
        print(f"  {region.id}: {region.name} ({region.code})")

    print("\n🏛️  都道府県データ:")
    for prefecture in resolver.prefectures:
        region = resolver.region_by_id(prefecture.region_id)
        print(f"  {prefecture.id}: {prefecture.name} → {region.name if region else '?'}")

    print("\n📊 統計:")
    print(f"  地方: {len(resolver.regions)}件")
    print(f"  都道府県: {len(resolver.prefectures)}件")
    print(f"  駅: {len(resolver.stations)}件")

    print("\n🎯 地方別都道府県数:")
    for region in resolver.regions:
        count = len(resolver.prefectures_in_region(region.id))
        print(f"  {region.name}: {count}件")

    print("\n✅ 静的データの確認が完了しました！")


if __name__ == "__main__":
    main()
