"""Tests for the station registry (/api/stations)"""


class TestCreateStation:
    """Test station creation"""

    def test_create_resolves_prefecture(self, client):
        """新宿区 resolves to 東京都 (id 13)"""
        response = client.post("/api/stations", json={"name": "新宿駅", "location": "新宿区"})
        assert response.status_code == 201
        station = response.json()
        assert station["name"] == "新宿駅"
        assert station["location"] == "新宿区"
        assert station["prefecture_id"] == 13
        assert isinstance(station["id"], int)
        assert station["created_at"]

    def test_duplicate_name_rejected(self, client, create_station):
        create_station("新宿駅", "新宿区")
        response = client.post("/api/stations", json={"name": "新宿駅", "location": "新宿区"})
        assert response.status_code == 400
        assert response.json() == {"error": "この駅名は既に登録されています"}

    def test_listed_exactly_once(self, client, create_station):
        create_station("新宿駅", "新宿区")
        client.post("/api/stations", json={"name": "新宿駅", "location": "新宿区"})
        names = client.get("/api/stations").json()
        assert names.count("新宿駅") == 1

    def test_unknown_location_leaves_prefecture_null(self, create_station):
        station = create_station("どこか駅", "どこか市")
        assert station["prefecture_id"] is None

    def test_explicit_prefecture_id_wins(self, create_station):
        station = create_station("新宿駅", "新宿区", prefecture_id=14)
        assert station["prefecture_id"] == 14

    def test_unknown_prefecture_id_rejected(self, client):
        response = client.post(
            "/api/stations", json={"name": "新宿駅", "location": "新宿区", "prefecture_id": 999}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "指定された都道府県が存在しません"}

    def test_missing_fields_rejected(self, client):
        for body in ({"name": "新宿駅"}, {"location": "新宿区"}, {"name": " ", "location": "新宿区"}):
            response = client.post("/api/stations", json=body)
            assert response.status_code == 400
            assert response.json() == {"error": "駅名と所在地は必須です"}
        assert client.get("/api/stations").json() == []

    def test_unique_constraint_catches_duplicate(self, client, create_station, monkeypatch):
        """A duplicate that slips past the name lookup is still rejected by the table"""
        create_station("新宿駅", "新宿区")
        monkeypatch.setattr("crud.station.get_station_by_name", lambda db, name: None)

        response = client.post("/api/stations", json={"name": "新宿駅", "location": "新宿区"})
        assert response.status_code == 400
        assert response.json() == {"error": "この駅名は既に登録されています"}

        # the failed insert is rolled back and later writes still go through
        assert client.get("/api/stations").json() == ["新宿駅"]
        assert client.post("/api/stations", json={"name": "渋谷駅", "location": "渋谷区"}).status_code == 201

    def test_malformed_json_rejected(self, client):
        response = client.post(
            "/api/stations", content="{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert "error" in response.json()


class TestListStations:
    """Test station listing"""

    def test_names_sorted(self, client, create_station):
        create_station("渋谷駅", "渋谷区")
        create_station("札幌駅", "札幌市")
        create_station("新宿駅", "新宿区")
        names = client.get("/api/stations").json()
        assert names == sorted(["渋谷駅", "札幌駅", "新宿駅"])

    def test_filter_by_prefecture(self, client, create_station):
        create_station("渋谷駅", "渋谷区")
        create_station("札幌駅", "札幌市")
        create_station("新宿駅", "新宿区")
        response = client.get("/api/stations", params={"prefecture_id": 13})
        assert response.json() == sorted(["渋谷駅", "新宿駅"])
        response = client.get("/api/stations", params={"prefecture_id": 1})
        assert response.json() == ["札幌駅"]

    def test_detailed_list(self, client, create_station):
        create_station("新宿駅", "新宿区")
        create_station("どこか駅", "どこか市")
        stations = client.get("/api/stations/all").json()

        # 新しい順
        assert [s["name"] for s in stations] == ["どこか駅", "新宿駅"]
        unknown, shinjuku = stations
        assert shinjuku["prefecture_name"] == "東京都"
        assert shinjuku["region_id"] == 3
        assert shinjuku["region_name"] == "関東地方"
        assert unknown["prefecture_id"] is None
        assert unknown["prefecture_name"] is None
        assert unknown["region_name"] is None

    def test_get_station(self, client, create_station):
        station = create_station("新宿駅", "新宿区")
        response = client.get(f"/api/stations/{station['id']}")
        assert response.status_code == 200
        assert response.json()["name"] == "新宿駅"

    def test_get_missing_station(self, client):
        response = client.get("/api/stations/999")
        assert response.status_code == 404
        assert response.json() == {"error": "駅が見つかりません"}


class TestUpdateStation:
    """Test station updates"""

    def test_update_re_resolves_prefecture(self, client, create_station):
        station = create_station("テスト駅", "新宿区")
        response = client.put(
            f"/api/stations/{station['id']}", json={"name": "テスト駅", "location": "札幌市"}
        )
        assert response.status_code == 200
        updated = response.json()
        assert updated["location"] == "札幌市"
        assert updated["prefecture_id"] == 1
        assert updated["created_at"] == station["created_at"]

    def test_update_missing_station(self, client):
        response = client.put("/api/stations/999", json={"name": "新宿駅", "location": "新宿区"})
        assert response.status_code == 404

    def test_update_validates_fields(self, client, create_station):
        station = create_station("新宿駅", "新宿区")
        response = client.put(f"/api/stations/{station['id']}", json={"name": "新宿駅"})
        assert response.status_code == 400

    def test_update_to_existing_name_rejected(self, client, create_station):
        create_station("新宿駅", "新宿区")
        other = create_station("渋谷駅", "渋谷区")
        response = client.put(
            f"/api/stations/{other['id']}", json={"name": "新宿駅", "location": "渋谷区"}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "この駅名は既に登録されています"}

    def test_rename_unique_constraint_catches_duplicate(self, client, create_station, monkeypatch):
        create_station("新宿駅", "新宿区")
        other = create_station("渋谷駅", "渋谷区")
        monkeypatch.setattr("crud.station.get_station_by_name", lambda db, name: None)

        response = client.put(
            f"/api/stations/{other['id']}", json={"name": "新宿駅", "location": "渋谷区"}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "この駅名は既に登録されています"}
        assert client.get(f"/api/stations/{other['id']}").json()["name"] == "渋谷駅"

    def test_update_keeping_own_name(self, client, create_station):
        station = create_station("新宿駅", "新宿区")
        response = client.put(
            f"/api/stations/{station['id']}", json={"name": "新宿駅", "location": "渋谷区"}
        )
        assert response.status_code == 200

    def test_rename_propagates_to_places(self, client, create_station, create_place):
        station = create_station("テスト駅", "練馬区")
        cafe = create_place("cafes", "喫茶 テスト", "テスト駅")
        bar = create_place("bars", "バー テスト", "テスト駅")
        assert cafe["location"] == "練馬区"
        assert cafe["station_id"] == station["id"]

        response = client.put(
            f"/api/stations/{station['id']}", json={"name": "テスト新駅", "location": "杉並区"}
        )
        assert response.status_code == 200

        cafe = client.get(f"/api/cafes/{cafe['id']}").json()
        bar = client.get(f"/api/bars/{bar['id']}").json()
        for place in (cafe, bar):
            assert place["station"] == "テスト新駅"
            assert place["location"] == "杉並区"
            assert place["station_id"] == station["id"]
        assert client.get("/api/cafes", params={"station": "テスト駅"}).json() == []

    def test_registering_station_links_existing_places(self, client, create_station, create_place):
        cafe = create_place("cafes", "喫茶 先行", "新設駅")
        assert cafe["location"] == "不明"
        assert cafe["station_id"] is None

        station = create_station("新設駅", "札幌市")
        assert station["prefecture_id"] == 1

        cafe = client.get(f"/api/cafes/{cafe['id']}").json()
        assert cafe["station_id"] == station["id"]
        assert cafe["location"] == "札幌市"


class TestDeleteStation:
    """Test station deletion and the usage check"""

    def test_delete_unused_station(self, client, create_station):
        station = create_station("新宿駅", "新宿区")
        response = client.delete(f"/api/stations/{station['id']}")
        assert response.status_code == 200
        assert response.json() == {"message": "駅を削除しました", "id": station["id"]}
        assert client.get(f"/api/stations/{station['id']}").status_code == 404
        assert client.get("/api/stations").json() == []

    def test_delete_missing_station(self, client):
        response = client.delete("/api/stations/999")
        assert response.status_code == 404

    def test_delete_blocked_by_each_place_kind(self, client, create_station, create_place):
        for kind in ("cafes", "bookstores", "bars"):
            station = create_station(f"{kind}駅", "新宿区")
            place = create_place(kind, "使用中", station["name"])

            response = client.delete(f"/api/stations/{station['id']}")
            assert response.status_code == 400
            body = response.json()
            assert body["error"] == "この駅は使用中のため削除できません"
            expected = {"cafes": 0, "bookstores": 0, "bars": 0}
            expected[kind] = 1
            assert body["usage"] == expected

            # 場所を消せば駅も消せる
            client.delete(f"/api/{kind}/{place['id']}")
            assert client.delete(f"/api/stations/{station['id']}").status_code == 200

    def test_delete_blocked_counts_all_kinds(self, client, create_station, create_place):
        station = create_station("新宿駅", "新宿区")
        create_place("cafes", "喫茶 A", "新宿駅")
        create_place("cafes", "喫茶 B", "新宿駅")
        create_place("bookstores", "本屋 A", "新宿駅")
        create_place("bars", "バー A", "渋谷駅")

        response = client.delete(f"/api/stations/{station['id']}")
        assert response.status_code == 400
        assert response.json()["usage"] == {"cafes": 2, "bookstores": 1, "bars": 0}
        assert "新宿駅" in client.get("/api/stations").json()
