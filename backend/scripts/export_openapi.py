#!/usr/bin/env python3
"""
OpenAPIスキーマをファイルに書き出すスクリプト

拡張子が .json ならJSON、それ以外はYAMLで出力する。

Usage:
    python backend/scripts/export_openapi.py [openapi.yaml]
"""

import json
import sys
from pathlib import Path

import yaml

# backendディレクトリをパスに追加
sys.path.insert(0, str(Path(__file__).parent.parent))

from main import app


def export_openapi(output_path: str = "openapi.yaml") -> Path:
    """アプリのOpenAPIスキーマを書き出し、出力先のパスを返す"""
    openapi_schema = app.openapi()

    output_file = Path(output_path)
    with output_file.open("w", encoding="utf-8") as f:
        if output_file.suffix == ".json":
            json.dump(openapi_schema, f, ensure_ascii=False, indent=2)
        else:
            yaml.safe_dump(
                openapi_schema,
                f,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            )
    return output_file


def main():
    output_path = sys.argv[1] if len(sys.argv) > 1 else "openapi.yaml"
    output_file = export_openapi(output_path)
    print(f"✅ {len(app.openapi()['paths'])} paths exported to {output_file.absolute()}")


if __name__ == "__main__":
    main()
