from pydantic import BaseModel, ConfigDict


# ============================================
# Region Schemas
# ============================================
class Region(BaseModel):
    """地方のAPI応答スキーマ"""

    id: int
    name: str
    code: str

    model_config = ConfigDict(from_attributes=True)


# ============================================
# Prefecture Schemas
# ============================================
class Prefecture(BaseModel):
    """都道府県のAPI応答スキーマ"""

    id: int
    name: str
    code: str
    region_id: int

    model_config = ConfigDict(from_attributes=True)
