import pytest

from mock_service import app


@pytest.fixture
def http():
    return app.test_client()


def _reserve(http, guests=2, **extra):
    body = {"name": "Somchai", "phone": "0800000000", "guests": guests,
            "date": "2026-10-17", "time": "19:05"}
    body.update(extra)
    return http.post("/reserve", json=body)


def test_read_only_endpoints(http):
    for path in ("/menu", "/tables", "/get-promotions", "/all-reviews", "/health"):
        assert http.get(path).status_code == 200
    assert http.get("/health").get_json()["status"] == "ok"
    assert len(http.get("/get-promotions").get_json()) == 3


def test_reserve_picks_smallest_fitting_table(http):
    resp = _reserve(http, guests=3)
    assert resp.status_code == 201
    assert resp.get_json()["tableNumber"] == "T2"

    tables = {t["id"]: t["status"] for t in http.get("/tables").get_json()}
    assert tables["T2"] == "reserved"


@pytest.mark.parametrize("override", [
    {"guests": "4"},
    {"guests": 0},
    {"name": ""},
    {"time": None},
])
def test_reserve_validation(http, override):
    assert _reserve(http, **override).status_code == 400


def test_reserve_no_table(http):
    assert _reserve(http, guests=20).status_code == 409


def test_status_is_latest_reservation(http):
    assert http.get("/status").status_code == 404
    _reserve(http, name="First")
    _reserve(http, name="Second")
    assert http.get("/status").get_json()["name"] == "Second"


def test_cancel_latest_and_by_id(http):
    first = _reserve(http).get_json()
    _reserve(http)

    latest = http.post("/cancel", json={})
    assert latest.status_code == 200
    assert latest.get_json()["reservation"]["id"] != first["id"]

    by_id = http.post("/cancel", json={"id": first["id"]})
    assert by_id.get_json()["reservation"]["status"] == "cancelled"

    assert http.post("/cancel", json={}).status_code == 404
    assert http.post("/cancel", json={"id": "missing"}).status_code == 404


def test_cancel_frees_table(http):
    table = _reserve(http, guests=8).get_json()["tableNumber"]
    http.post("/cancel", json={})
    tables = {t["id"]: t["status"] for t in http.get("/tables").get_json()}
    assert tables[table] == "available"


def test_reviews(http):
    ok = http.post("/add-review", json={"reviewer": "Nok", "rating": 5,
                                        "comment": "ดีมาก", "dishes": ["ผัดไทย"]})
    assert ok.status_code == 201
    assert http.post("/add-review", json={"reviewer": "Nok", "rating": 6}).status_code == 400
    assert http.post("/add-review", json={"reviewer": "", "rating": 3}).status_code == 400

    reviews = http.get("/all-reviews").get_json()
    assert [r["reviewer"] for r in reviews] == ["Nok"]
    assert reviews[0]["dishes"] == ["ผัดไทย"]
