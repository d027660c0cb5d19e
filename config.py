import os
from pathlib import Path

# Адрес сервиса ресторана (Service A)
SERVICE_URL = os.getenv("SERVICE_URL", "http://localhost:3000")

# Таймаут запросов в секундах; пусто = ждать бесконечно
_timeout = os.getenv("REQUEST_TIMEOUT", "").strip()
REQUEST_TIMEOUT = float(_timeout) if _timeout else None
if REQUEST_TIMEOUT is not None and REQUEST_TIMEOUT <= 0:
    raise ValueError(f"REQUEST_TIMEOUT must be > 0, got {_timeout}")

# Локальная заглушка сервиса
MOCK_SERVICE_HOST = os.getenv("MOCK_SERVICE_HOST", "127.0.0.1")
MOCK_SERVICE_PORT = int(os.getenv("MOCK_SERVICE_PORT", "3000"))

# Логи
LOG_DIR = os.getenv("LOG_DIR", str(Path("./logs").resolve()))
Path(LOG_DIR).mkdir(parents=True, exist_ok=True)
