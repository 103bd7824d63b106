"""Tests for /api/regions and /api/prefectures"""


class TestRegionEndpoints:
    """Test region and prefecture listing"""

    def test_list_regions(self, client):
        response = client.get("/api/regions")
        assert response.status_code == 200
        regions = response.json()
        assert [r["id"] for r in regions] == list(range(1, 9))
        assert regions[2] == {"id": 3, "name": "関東地方", "code": "kanto"}

    def test_list_all_prefectures(self, client):
        response = client.get("/api/prefectures")
        assert response.status_code == 200
        prefectures = response.json()
        assert len(prefectures) == 47
        assert [p["id"] for p in prefectures] == list(range(1, 48))

    def test_list_prefectures_by_region(self, client):
        response = client.get("/api/prefectures", params={"region_id": 3})
        assert response.status_code == 200
        prefectures = response.json()
        assert [p["name"] for p in prefectures] == [
            "茨城県",
            "栃木県",
            "群馬県",
            "埼玉県",
            "千葉県",
            "東京都",
            "神奈川県",
        ]
        assert all(p["region_id"] == 3 for p in prefectures)

    def test_list_prefectures_unknown_region(self, client):
        response = client.get("/api/prefectures", params={"region_id": 99})
        assert response.status_code == 200
        assert response.json() == []

    def test_invalid_region_id(self, client):
        """Non-integer query parameter is a 400 with an error body"""
        response = client.get("/api/prefectures", params={"region_id": "abc"})
        assert response.status_code == 400
        assert "error" in response.json()


class TestStaticFallback:
    """Test fallback to static data when the database is unreachable"""

    def test_regions_fallback(self, broken_client):
        response = broken_client.get("/api/regions")
        assert response.status_code == 200
        assert len(response.json()) == 8

    def test_prefectures_fallback(self, broken_client):
        response = broken_client.get("/api/prefectures", params={"region_id": 8})
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == list(range(40, 48))

    def test_station_names_fallback(self, broken_client):
        response = broken_client.get("/api/stations", params={"prefecture_id": 1})
        assert response.status_code == 200
        assert response.json() == sorted(["札幌駅", "新千歳空港駅", "函館駅", "旭川駅"])

    def test_writes_fail_with_error_body(self, broken_client):
        response = broken_client.post(
            "/api/stations", json={"name": "新宿駅", "location": "新宿区"}
        )
        assert response.status_code == 500
        assert response.json() == {"error": "データベースに接続できません"}

    def test_place_list_fails_with_error_body(self, broken_client):
        response = broken_client.get("/api/cafes")
        assert response.status_code == 500
        assert response.json() == {"error": "データベースに接続できません"}
