import logging
import re

import requests

from pretty_json import print_pretty_json

logger = logging.getLogger("restaurant_client")

ERROR_PREFIX = "เกิดข้อผิดพลาด: "
_LINE_BREAK = re.compile(r"\r\n?|\n")


def _read_body(resp):
    # тело читается построчно и склеивается без переводов строк (только \r и \n)
    return _LINE_BREAK.sub("", resp.text)


def _report(resp, console):
    console.say(f"รหัสตอบกลับ: {resp.status_code}")
    if 200 <= resp.status_code < 300:
        console.say("ข้อมูลที่ได้รับ:")
        print_pretty_json(_read_body(resp), console)
    else:
        console.say(ERROR_PREFIX + (resp.reason or ""))
        err_body = _read_body(resp)
        if err_body:
            console.say("ข้อความผิดพลาด: " + err_body)
    return resp.status_code


def send_get(url, console, timeout=None):
    """GET без тела. Возвращает код ответа или None, если запрос не дошёл."""
    console.say(f"\nกำลังส่งคำขอ GET ไปที่ {url}")
    try:
        with requests.get(url, timeout=timeout) as resp:
            logger.info(f"GET {url} -> {resp.status_code}")
            return _report(resp, console)
    except requests.RequestException as e:
        logger.exception(f"GET {url} failed")
        console.say(ERROR_PREFIX + str(e))
        return None


def send_post(url, body, console, timeout=None):
    """POST с готовым JSON-телом (строка)."""
    console.say(f"\nกำลังส่งคำขอ POST ไปที่ {url}")
    console.say("ข้อมูล: " + body)
    try:
        with requests.post(
            url,
            data=body.encode("utf-8"),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        ) as resp:
            logger.info(f"POST {url} -> {resp.status_code}")
            return _report(resp, console)
    except requests.RequestException as e:
        logger.exception(f"POST {url} failed")
        console.say(ERROR_PREFIX + str(e))
        return None
