"""日本の八地方区分・都道府県・駅の静的データと、所在地の解決ロジック

ここにあるデータはDBへの初期投入に使われるほか、DBに接続できないときの
フォールバックとしてもそのまま返される。
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

UNKNOWN_LOCATION = "不明"


@dataclass(frozen=True)
class RegionData:
    id: int
    name: str
    code: str


@dataclass(frozen=True)
class PrefectureData:
    id: int
    name: str
    code: str
    region_id: int


@dataclass(frozen=True)
class StationData:
    name: str
    location: str
    prefecture_name: str


# ============================================
# 八地方区分
# ============================================
REGIONS: tuple[RegionData, ...] = (
    RegionData(1, "北海道地方", "hokkaido"),
    RegionData(2, "東北地方", "tohoku"),
    RegionData(3, "関東地方", "kanto"),
    RegionData(4, "中部地方", "chubu"),
    RegionData(5, "近畿地方", "kinki"),
    RegionData(6, "中国地方", "chugoku"),
    RegionData(7, "四国地方", "shikoku"),
    RegionData(8, "九州・沖縄地方", "kyushu_okinawa"),
)

# ============================================
# 都道府県
# ============================================
PREFECTURES: tuple[PrefectureData, ...] = (
    # 北海道地方
    PrefectureData(1, "北海道", "hokkaido", 1),
    # 東北地方
    PrefectureData(2, "青森県", "aomori", 2),
    PrefectureData(3, "岩手県", "iwate", 2),
    PrefectureData(4, "宮城県", "miyagi", 2),
    PrefectureData(5, "秋田県", "akita", 2),
    PrefectureData(6, "山形県", "yamagata", 2),
    PrefectureData(7, "福島県", "fukushima", 2),
    # 関東地方
    PrefectureData(8, "茨城県", "ibaraki", 3),
    PrefectureData(9, "栃木県", "tochigi", 3),
    PrefectureData(10, "群馬県", "gunma", 3),
    PrefectureData(11, "埼玉県", "saitama", 3),
    PrefectureData(12, "千葉県", "chiba", 3),
    PrefectureData(13, "東京都", "tokyo", 3),
    PrefectureData(14, "神奈川県", "kanagawa", 3),
    # 中部地方
    PrefectureData(15, "新潟県", "niigata", 4),
    PrefectureData(16, "富山県", "toyama", 4),
    PrefectureData(17, "石川県", "ishikawa", 4),
    PrefectureData(18, "福井県", "fukui", 4),
    PrefectureData(19, "山梨県", "yamanashi", 4),
    PrefectureData(20, "長野県", "nagano", 4),
    PrefectureData(21, "岐阜県", "gifu", 4),
    PrefectureData(22, "静岡県", "shizuoka", 4),
    PrefectureData(23, "愛知県", "aichi", 4),
    # 近畿地方
    PrefectureData(24, "三重県", "mie", 5),
    PrefectureData(25, "滋賀県", "shiga", 5),
    PrefectureData(26, "京都府", "kyoto", 5),
    PrefectureData(27, "大阪府", "osaka", 5),
    PrefectureData(28, "兵庫県", "hyogo", 5),
    PrefectureData(29, "奈良県", "nara", 5),
    PrefectureData(30, "和歌山県", "wakayama", 5),
    # 中国地方
    PrefectureData(31, "鳥取県", "tottori", 6),
    PrefectureData(32, "島根県", "shimane", 6),
    PrefectureData(33, "岡山県", "okayama", 6),
    PrefectureData(34, "広島県", "hiroshima", 6),
    PrefectureData(35, "山口県", "yamaguchi", 6),
    # 四国地方
    PrefectureData(36, "徳島県", "tokushima", 7),
    PrefectureData(37, "香川県", "kagawa", 7),
    PrefectureData(38, "愛媛県", "ehime", 7),
    PrefectureData(39, "高知県", "kochi", 7),
    # 九州・沖縄地方
    PrefectureData(40, "福岡県", "fukuoka", 8),
    PrefectureData(41, "佐賀県", "saga", 8),
    PrefectureData(42, "長崎県", "nagasaki", 8),
    PrefectureData(43, "熊本県", "kumamoto", 8),
    PrefectureData(44, "大分県", "oita", 8),
    PrefectureData(45, "宮崎県", "miyazaki", 8),
    PrefectureData(46, "鹿児島県", "kagoshima", 8),
    PrefectureData(47, "沖縄県", "okinawa", 8),
)

# ============================================
# 主要駅
# ============================================
STATIONS: tuple[StationData, ...] = (
    # 北海道
    StationData("札幌駅", "札幌市", "北海道"),
    StationData("新千歳空港駅", "千歳市", "北海道"),
    StationData("函館駅", "函館市", "北海道"),
    StationData("旭川駅", "旭川市", "北海道"),
    # 東北地方
    StationData("青森駅", "青森市", "青森県"),
    StationData("盛岡駅", "盛岡市", "岩手県"),
    StationData("仙台駅", "仙台市", "宮城県"),
    StationData("秋田駅", "秋田市", "秋田県"),
    StationData("山形駅", "山形市", "山形県"),
    StationData("郡山駅", "郡山市", "福島県"),
    StationData("いわき駅", "いわき市", "福島県"),
    # 関東地方
    StationData("水戸駅", "水戸市", "茨城県"),
    StationData("つくば駅", "つくば市", "茨城県"),
    StationData("宇都宮駅", "宇都宮市", "栃木県"),
    StationData("前橋駅", "前橋市", "群馬県"),
    StationData("高崎駅", "高崎市", "群馬県"),
    StationData("大宮駅", "さいたま市", "埼玉県"),
    StationData("川越駅", "川越市", "埼玉県"),
    StationData("千葉駅", "千葉市", "千葉県"),
    StationData("船橋駅", "船橋市", "千葉県"),
    StationData("柏駅", "柏市", "千葉県"),
    # 東京都
    StationData("東京駅", "千代田区", "東京都"),
    StationData("新宿駅", "新宿区", "東京都"),
    StationData("渋谷駅", "渋谷区", "東京都"),
    StationData("池袋駅", "豊島区", "東京都"),
    StationData("品川駅", "港区", "東京都"),
    StationData("上野駅", "台東区", "東京都"),
    StationData("秋葉原駅", "千代田区", "東京都"),
    StationData("原宿駅", "渋谷区", "東京都"),
    StationData("恵比寿駅", "渋谷区", "東京都"),
    StationData("代官山駅", "目黒区", "東京都"),
    StationData("新橋駅", "港区", "東京都"),
    StationData("有楽町駅", "千代田区", "東京都"),
    StationData("銀座駅", "中央区", "東京都"),
    StationData("六本木駅", "港区", "東京都"),
    StationData("表参道駅", "港区", "東京都"),
    StationData("赤坂駅", "港区", "東京都"),
    # 神奈川県
    StationData("横浜駅", "横浜市", "神奈川県"),
    StationData("川崎駅", "川崎市", "神奈川県"),
    StationData("藤沢駅", "藤沢市", "神奈川県"),
    StationData("鎌倉駅", "鎌倉市", "神奈川県"),
    StationData("小田原駅", "小田原市", "神奈川県"),
    # 中部地方
    StationData("新潟駅", "新潟市", "新潟県"),
    StationData("富山駅", "富山市", "富山県"),
    StationData("金沢駅", "金沢市", "石川県"),
    StationData("福井駅", "福井市", "福井県"),
    StationData("甲府駅", "甲府市", "山梨県"),
    StationData("長野駅", "長野市", "長野県"),
    StationData("松本駅", "松本市", "長野県"),
    StationData("岐阜駅", "岐阜市", "岐阜県"),
    StationData("静岡駅", "静岡市", "静岡県"),
    StationData("浜松駅", "浜松市", "静岡県"),
    StationData("名古屋駅", "名古屋市", "愛知県"),
    StationData("豊田市駅", "豊田市", "愛知県"),
    # 近畿地方
    StationData("津駅", "津市", "三重県"),
    StationData("四日市駅", "四日市市", "三重県"),
    StationData("大津駅", "大津市", "滋賀県"),
    StationData("京都駅", "京都市", "京都府"),
    StationData("大阪駅", "大阪市", "大阪府"),
    StationData("難波駅", "大阪市", "大阪府"),
    StationData("天王寺駅", "大阪市", "大阪府"),
    StationData("神戸駅", "神戸市", "兵庫県"),
    StationData("姫路駅", "姫路市", "兵庫県"),
    StationData("奈良駅", "奈良市", "奈良県"),
    StationData("和歌山駅", "和歌山市", "和歌山県"),
    # 中国地方
    StationData("鳥取駅", "鳥取市", "鳥取県"),
    StationData("松江駅", "松江市", "島根県"),
    StationData("岡山駅", "岡山市", "岡山県"),
    StationData("倉敷駅", "倉敷市", "岡山県"),
    StationData("広島駅", "広島市", "広島県"),
    StationData("下関駅", "下関市", "山口県"),
    # 四国地方
    StationData("徳島駅", "徳島市", "徳島県"),
    StationData("高松駅", "高松市", "香川県"),
    StationData("松山駅", "松山市", "愛媛県"),
    StationData("高知駅", "高知市", "高知県"),
    # 九州・沖縄地方
    StationData("博多駅", "福岡市", "福岡県"),
    StationData("天神駅", "福岡市", "福岡県"),
    StationData("小倉駅", "北九州市", "福岡県"),
    StationData("佐賀駅", "佐賀市", "佐賀県"),
    StationData("長崎駅", "長崎市", "長崎県"),
    StationData("熊本駅", "熊本市", "熊本県"),
    StationData("大分駅", "大分市", "大分県"),
    StationData("宮崎駅", "宮崎市", "宮崎県"),
    StationData("鹿児島中央駅", "鹿児島市", "鹿児島県"),
    StationData("那覇空港駅", "那覇市", "沖縄県"),
    StationData("首里駅", "那覇市", "沖縄県"),
)

# 駅データに出てこない東京都の区（既存データ用）
TOKYO_WARDS = (
    "渋谷区",
    "新宿区",
    "池袋区",  # 実際は豊島区だが、既存データに合わせる
    "千代田区",
    "港区",
    "台東区",
    "目黒区",
    "品川区",
    "中央区",
    "文京区",
    "墨田区",
    "江東区",
    "豊島区",
    "北区",
    "荒川区",
    "板橋区",
    "練馬区",
    "足立区",
    "葛飾区",
    "江戸川区",
    "世田谷区",
    "杉並区",
    "中野区",
)


class HierarchyResolver:
    """地方→都道府県→駅の静的データを保持し、所在地を解決する

    駅の登録・更新（所在地→都道府県）と場所の登録・更新（駅→所在地）の
    両方がこのクラスを参照する。インスタンスは不変。
    """

    def __init__(
        self,
        regions: tuple[RegionData, ...] = REGIONS,
        prefectures: tuple[PrefectureData, ...] = PREFECTURES,
        stations: tuple[StationData, ...] = STATIONS,
    ):
        self.regions = regions
        self.prefectures = prefectures
        self.stations = stations

        location_map = {ward: "東京都" for ward in TOKYO_WARDS}
        for station in stations:
            location_map.setdefault(station.location, station.prefecture_name)
        self.location_prefecture_map: Mapping[str, str] = MappingProxyType(location_map)
        self.station_location_map: Mapping[str, str] = MappingProxyType(
            {station.name: station.location for station in stations}
        )

    def prefecture_name_for_location(self, location: str) -> Optional[str]:
        """市区町村名から都道府県名を取得（不明ならNone）"""
        return self.location_prefecture_map.get(location.strip())

    def location_for_station(self, station: str) -> Optional[str]:
        """駅名から市区町村名を取得（静的データにない駅はNone）"""
        return self.station_location_map.get(station.strip())

    def prefecture_by_id(self, prefecture_id: int) -> Optional[PrefectureData]:
        return next((p for p in self.prefectures if p.id == prefecture_id), None)

    def prefecture_by_name(self, name: str) -> Optional[PrefectureData]:
        return next((p for p in self.prefectures if p.name == name), None)

    def region_by_id(self, region_id: int) -> Optional[RegionData]:
        return next((r for r in self.regions if r.id == region_id), None)

    def prefectures_in_region(self, region_id: Optional[int] = None) -> list[PrefectureData]:
        if region_id is None:
            return list(self.prefectures)
        return [p for p in self.prefectures if p.region_id == region_id]

    def station_names(self, prefecture_id: Optional[int] = None) -> list[str]:
        """駅名一覧（名前順）"""
        if prefecture_id is None:
            names = [s.name for s in self.stations]
        else:
            prefecture = self.prefecture_by_id(prefecture_id)
            if prefecture is None:
                return []
            names = [s.name for s in self.stations if s.prefecture_name == prefecture.name]
        return sorted(names)


resolver = HierarchyResolver()


def get_resolver() -> HierarchyResolver:
    """FastAPIの依存性注入用"""
    return resolver
