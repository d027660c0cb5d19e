import json
from typing import List, Optional

from pydantic import BaseModel


class Reservation(BaseModel):
    name: str
    phone: str
    guests: int
    date: str  # YYYY-MM-DD
    time: str  # HH:mm


class Review(BaseModel):
    reviewer: str
    rating: int
    comment: str
    dishes: List[str]


class Cancellation(BaseModel):
    # None → отменить последнее бронирование
    id: Optional[str] = None


def to_json(model: BaseModel) -> str:
    """Тело запроса: пустые необязательные поля выкидываем, кириллица/тайский без \\u-экранирования."""
    return json.dumps(model.model_dump(exclude_none=True), ensure_ascii=False)


def parse_dishes(text: str) -> List[str]:
    # "" → [""]: пустой ввод даёт одно пустое блюдо
    return [d.strip() for d in text.split(",")]
