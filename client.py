import argparse
import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler

from config import LOG_DIR, REQUEST_TIMEOUT, SERVICE_URL
from console import Console
from http_client import send_get, send_post
from payloads import Cancellation, Reservation, Review, parse_dishes, to_json

logger = logging.getLogger("restaurant_client")

MENU = [
    ("1", "ขอเมนูอาหาร (GET /menu)"),
    ("2", "ขอข้อมูลโต๊ะ (GET /tables)"),
    ("3", "ส่งรีวิว (POST /add-review)"),
    ("4", "ดูสถานะการจองล่าสุด (GET /status)"),
    ("5", "จองโต๊ะ (POST /reserve)"),
    ("6", "ยกเลิกการจอง (POST /cancel)"),
    ("7", "ขอข้อมูลโปรโมชั่น (GET /get-promotions)"),
    ("8", "ดูรีวิวทั้งหมด (GET /all-reviews)"),
    ("9", "ตรวจสอบสถานะของ Service A (GET /health)"),
    ("0", "ออกจากโปรแกรม"),
]


def setup_logging():
    # повторный main() в том же процессе не должен дублировать записи
    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return
    log_path = os.path.join(LOG_DIR, "client.log")
    handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(message)s")
    handler.setFormatter(fmt)
    logger.setLevel(logging.INFO)
    logger.addHandler(handler)


# --- формы ввода ---

def collect_reservation(console, now=None):
    console.say("\n== จองโต๊ะ ==")
    name = console.ask("ชื่อผู้จอง: ")
    phone = console.ask("เบอร์โทรศัพท์: ")
    guests = int(console.ask("จำนวนคน: "))

    # пустой ввод → текущие дата/время
    now = now or datetime.now()
    today = now.strftime("%Y-%m-%d")
    date = console.ask(f"วันที่จอง [{today}]: ") or today
    current_time = now.strftime("%H:%M")
    time = console.ask(f"เวลาจอง [{current_time}]: ") or current_time

    return Reservation(name=name, phone=phone, guests=guests, date=date, time=time)


def collect_review(console):
    console.say("\n== ส่งรีวิว ==")
    reviewer = console.ask("ชื่อผู้รีวิว: ")
    rating = int(console.ask("คะแนน (1-5): "))
    comment = console.ask("ความคิดเห็น: ")
    dishes = parse_dishes(console.ask("รายการอาหารที่รับประทาน (คั่นด้วยเครื่องหมาย ,): "))
    return Review(reviewer=reviewer, rating=rating, comment=comment, dishes=dishes)


def collect_cancellation(console):
    console.say("\n== ยกเลิกการจอง ==")
    reservation_id = console.ask("รหัสการจอง (หากต้องการยกเลิกการจองล่าสุดให้กด Enter): ")
    return Cancellation(id=reservation_id or None)


class RestaurantClient:
    """Одно действие меню = один HTTP-запрос к сервису ресторана."""

    def __init__(self, base_url, console, timeout=None):
        self.base_url = base_url.rstrip("/")
        self.console = console
        self.timeout = timeout

    def _get(self, path):
        return send_get(self.base_url + path, self.console, timeout=self.timeout)

    def _post(self, path, payload):
        return send_post(self.base_url + path, to_json(payload), self.console, timeout=self.timeout)

    def get_menu(self):
        return self._get("/menu")

    def get_tables(self):
        return self._get("/tables")

    def get_status(self):
        return self._get("/status")

    def get_promotions(self):
        return self._get("/get-promotions")

    def get_all_reviews(self):
        return self._get("/all-reviews")

    def check_health(self):
        return self._get("/health")

    def add_review(self):
        return self._post("/add-review", collect_review(self.console))

    def create_reservation(self):
        return self._post("/reserve", collect_reservation(self.console))

    def cancel_reservation(self):
        return self._post("/cancel", collect_cancellation(self.console))

    def actions(self):
        return {
            "1": self.get_menu,
            "2": self.get_tables,
            "3": self.add_review,
            "4": self.get_status,
            "5": self.create_reservation,
            "6": self.cancel_reservation,
            "7": self.get_promotions,
            "8": self.get_all_reviews,
            "9": self.check_health,
        }


def print_menu(console):
    console.say("\nเลือกบริการ:")
    for key, label in MENU:
        console.say(f"{key} = {label}")


def run_menu(client, console):
    actions = client.actions()
    while True:
        print_menu(console)
        try:
            choice = console.ask("กรุณาเลือก (0-9): ").strip()
        except EOFError:
            console.say()
            break

        if choice == "0":
            break
        action = actions.get(choice)
        if action is None:
            console.say("เลือกไม่ถูกต้อง กรุณาลองใหม่")
            continue

        try:
            action()
        except ValueError as e:
            # нечисловые guests/rating и т.п. не должны ронять сессию
            logger.warning(f"Invalid input for choice {choice}: {e}")
            console.say(f"ข้อมูลไม่ถูกต้อง: {e}")
        except EOFError:
            console.say()
            break

    console.say("ปิดโปรแกรม Client B")


def positive_timeout(value):
    timeout = float(value)
    if timeout <= 0:
        raise argparse.ArgumentTypeError(f"timeout must be > 0, got {value}")
    return timeout


def main(argv=None):
    parser = argparse.ArgumentParser(description="Interactive client for the restaurant service")
    parser.add_argument("--url", default=SERVICE_URL, help="Service base URL")
    parser.add_argument("--timeout", type=positive_timeout, default=REQUEST_TIMEOUT,
                        help="Request timeout in seconds (default: wait forever)")
    args = parser.parse_args(argv)

    setup_logging()
    logger.info(f"Client started. SERVICE_URL={args.url} TIMEOUT={args.timeout}")

    console = Console()
    console.say("==== Client B ====")
    run_menu(RestaurantClient(args.url, console, timeout=args.timeout), console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
