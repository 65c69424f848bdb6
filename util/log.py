# util/log.py
import logging
import time
from util.constants import InternalURIs

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class HealthAccessFilter(logging.Filter):
    """
    Let through at most one uvicorn access line per `interval` seconds for
    health polling. uvicorn.access records carry
    (client, method, path, http_version, status) as args.
    """

    def __init__(self, path: str = InternalURIs.HEALTH, interval: float = 120.0) -> None:
        super().__init__()
        self._path = path
        self._interval = interval
        self._next_allowed: float | None = None

    def _request_path(self, record: logging.LogRecord) -> str:
        args = record.args
        if isinstance(args, tuple) and len(args) >= 3:
            return str(args[2]).split("?", 1)[0]
        return ""

    def filter(self, record: logging.LogRecord) -> bool:
        if self._request_path(record) != self._path:
            return True
        now = time.monotonic()
        if self._next_allowed is not None and now < self._next_allowed:
            return False
        self._next_allowed = now + self._interval
        return True


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("uvicorn.access").addFilter(HealthAccessFilter())
