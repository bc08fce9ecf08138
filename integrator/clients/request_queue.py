import base64
import logging
import threading
import time
from collections import deque
from concurrent.futures import Future
from dataclasses import dataclass, field

import requests

logger = logging.getLogger(__name__)

DEFAULT_REQUESTS_PER_MINUTE = 30


@dataclass
class QueuedRequest:
    method: str
    path: str
    data: object = None
    future: Future = field(default_factory=Future)


class RequestQueue:
    """FIFO queue that sends one request at a time to the remote API.

    After every attempt, successful or not, the consumer sleeps
    ``60 / requests_per_minute`` seconds before taking the next entry. The
    consumer thread is started by ``submit`` when the queue is idle and exits
    once it finds the queue empty.
    """

    def __init__(self, api_key, base_url, requests_per_minute=DEFAULT_REQUESTS_PER_MINUTE, session=None):
        if requests_per_minute <= 0:
            raise ValueError("requests_per_minute must be positive")
        self.base_url = (base_url or '').rstrip('/')
        self.requests_per_minute = requests_per_minute
        self.session = session or requests.Session()
        self.session.headers.update(self.auth_headers(api_key))
        self._pending = deque()
        self._lock = threading.Lock()
        self._processing = False

    @staticmethod
    def auth_headers(api_key) -> dict:
        token = base64.b64encode(f"{api_key or ''}:".encode('utf-8')).decode('ascii')
        return {
            'Authorization': f'Basic {token}',
            'Content-Type': 'application/json',
        }

    @property
    def interval(self) -> float:
        return 60.0 / self.requests_per_minute

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._pending)

    @property
    def processing(self) -> bool:
        return self._processing

    def submit(self, method, path, data=None) -> Future:
        entry = QueuedRequest(method=method.upper(), path=path.lstrip('/'), data=data)
        with self._lock:
            self._pending.append(entry)
            if not self._processing:
                self._processing = True
                threading.Thread(target=self._drain, name='picqer-request-queue', daemon=True).start()
        return entry.future

    def _drain(self):
        try:
            while True:
                with self._lock:
                    if not self._pending:
                        self._processing = False
                        return
                    entry = self._pending.popleft()
                if self._dispatch(entry):
                    time.sleep(self.interval)
        except BaseException:
            # let the next submit() start a fresh consumer
            with self._lock:
                self._processing = False
            raise

    def _dispatch(self, entry) -> bool:
        """Send one entry; False when the caller cancelled it before dispatch."""
        if not entry.future.set_running_or_notify_cancel():
            logger.debug("Skipping cancelled Picqer API request to %s", entry.path)
            return False
        url = f"{self.base_url}/{entry.path}"
        try:
            response = self.session.request(entry.method, url, json=entry.data)
            response.raise_for_status()
            entry.future.set_result(response.json())
        except Exception as exc:
            logger.error("Error in Picqer API request to %s: %s", entry.path, exc)
            entry.future.set_exception(exc)
        return True
