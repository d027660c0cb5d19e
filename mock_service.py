import copy
import logging
import os
import threading
import uuid
from datetime import datetime
from logging.handlers import RotatingFileHandler

from flask import Flask, jsonify, request

from config import LOG_DIR, MOCK_SERVICE_HOST, MOCK_SERVICE_PORT

app = Flask(__name__)
app.json.ensure_ascii = False

SEED = {
    "menu": [
        {"id": "m-1", "name": "ต้มยำกุ้ง", "price": 180.0},
        {"id": "m-2", "name": "ผัดไทย", "price": 90.0},
        {"id": "m-3", "name": "ส้มตำ", "price": 60.0},
        {"id": "m-4", "name": "ข้าวเหนียวมะม่วง", "price": 80.0},
    ],
    "tables": [
        {"id": "T1", "capacity": 2, "status": "available"},
        {"id": "T2", "capacity": 4, "status": "available"},
        {"id": "T3", "capacity": 4, "status": "available"},
        {"id": "T4", "capacity": 8, "status": "available"},
    ],
    "promotions": [
        {"id": "p-1", "name": "Summer Special", "description": "Get 20% off on all drinks",
         "discount_percentage": 20.0, "start_date": "2023-06-01", "end_date": "2099-08-31"},
        {"id": "p-2", "name": "Happy Hour", "description": "50% off appetizers from 4-6pm",
         "discount_percentage": 50.0, "start_date": "2023-01-01", "end_date": "2099-12-31"},
        {"id": "p-3", "name": "Weekend Brunch", "description": "Free dessert with main course",
         "discount_percentage": 0.0, "start_date": "2023-01-01", "end_date": "2099-12-31"},
    ],
}

# Состояние в памяти: dev-сервер многопоточный, всё под одной блокировкой
_lock = threading.Lock()
_store = {}


def reset_store():
    with _lock:
        _store.clear()
        _store["tables"] = copy.deepcopy(SEED["tables"])
        _store["reservations"] = []
        _store["reviews"] = []


def setup_logging():
    log_path = os.path.join(LOG_DIR, "mock_service.log")
    handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(message)s")
    handler.setFormatter(fmt)
    app.logger.setLevel(logging.INFO)
    app.logger.addHandler(handler)


def init_app():
    setup_logging()
    reset_store()
    app.logger.info(f"Mock service started. HOST={MOCK_SERVICE_HOST} PORT={MOCK_SERVICE_PORT}")


init_app()


def _now():
    return datetime.now().isoformat(timespec="seconds")


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _bad_request(message):
    app.logger.warning(message)
    return jsonify(error="ValidationError", message=message), 400


@app.get("/health")
def health():
    return jsonify(status="ok", service="Service A", timestamp=_now())


@app.get("/menu")
def menu():
    return jsonify(SEED["menu"])


@app.get("/tables")
def tables():
    with _lock:
        return jsonify(_store["tables"])


@app.get("/get-promotions")
def promotions():
    return jsonify(SEED["promotions"])


@app.post("/reserve")
def reserve():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return _bad_request("Body must be a JSON object")

    for field in ("name", "phone", "date", "time"):
        if not isinstance(payload.get(field), str) or not payload[field].strip():
            return _bad_request(f"ต้องระบุ {field}")
    guests = payload.get("guests")
    if not _is_int(guests) or guests <= 0:
        return _bad_request("guests must be a positive integer")

    with _lock:
        table = next(
            (t for t in sorted(_store["tables"], key=lambda t: t["capacity"])
             if t["status"] == "available" and t["capacity"] >= guests),
            None,
        )
        if table is None:
            msg = f"No free table for {guests} guests"
            app.logger.warning(msg)
            return jsonify(error="NoTable", message=msg), 409

        table["status"] = "reserved"
        reservation = {
            "id": uuid.uuid4().hex[:8].upper(),
            "name": payload["name"],
            "phone": payload["phone"],
            "guests": guests,
            "date": payload["date"],
            "time": payload["time"],
            "tableNumber": table["id"],
            "status": "confirmed",
            "createdAt": _now(),
        }
        _store["reservations"].append(reservation)

    app.logger.info(f"Reserved {reservation['id']} -> table {table['id']}")
    return jsonify(reservation), 201


@app.get("/status")
def status():
    with _lock:
        if not _store["reservations"]:
            return jsonify(error="NotFound", message="ยังไม่มีการจอง"), 404
        return jsonify(_store["reservations"][-1])


@app.post("/cancel")
def cancel():
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        return _bad_request("Body must be a JSON object")
    reservation_id = payload.get("id")

    with _lock:
        active = [r for r in _store["reservations"] if r["status"] != "cancelled"]
        if reservation_id is None:
            # {} → последнее активное бронирование
            target = active[-1] if active else None
        else:
            target = next((r for r in active if r["id"] == reservation_id), None)

        if target is None:
            msg = f"Reservation not found: id={reservation_id}"
            app.logger.warning(msg)
            return jsonify(error="NotFound", message=msg), 404

        target["status"] = "cancelled"
        for t in _store["tables"]:
            if t["id"] == target["tableNumber"]:
                t["status"] = "available"

    app.logger.info(f"Cancelled {target['id']}")
    return jsonify(message="ยกเลิกการจองแล้ว", reservation=target)


@app.post("/add-review")
def add_review():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return _bad_request("Body must be a JSON object")

    reviewer = payload.get("reviewer")
    if not isinstance(reviewer, str) or not reviewer.strip():
        return _bad_request("ต้องระบุชื่อผู้รีวิว")
    rating = payload.get("rating")
    if not _is_int(rating) or not 1 <= rating <= 5:
        return _bad_request("rating must be an integer between 1 and 5")
    dishes = payload.get("dishes", [])
    if not isinstance(dishes, list) or not all(isinstance(d, str) for d in dishes):
        return _bad_request("dishes must be a list of strings")

    review = {
        "id": uuid.uuid4().hex[:8].upper(),
        "reviewer": reviewer,
        "rating": rating,
        "comment": payload.get("comment", ""),
        "dishes": dishes,
        "timestamp": _now(),
    }
    with _lock:
        _store["reviews"].append(review)

    app.logger.info(f"Review {review['id']} from {reviewer}: rating={rating}")
    return jsonify(review), 201


@app.get("/all-reviews")
def all_reviews():
    with _lock:
        return jsonify(_store["reviews"])


def main():
    app.run(host=MOCK_SERVICE_HOST, port=MOCK_SERVICE_PORT)


if __name__ == "__main__":
    main()
