from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .base import BaseClient
from .request_queue import RequestQueue


class PicqerApiError(Exception):
    """The Picqer API answered with something other than a collection."""


class PicqerClient(BaseClient):
    def __init__(self, api_key=None, base_url=None, requests_per_minute=None, session=None):
        self.api_key = api_key if api_key is not None else settings.PICQER_API_KEY
        self.base_url = base_url if base_url is not None else settings.PICQER_BASE_URL
        rpm = requests_per_minute or settings.PICQER_REQUESTS_PER_MINUTE
        self.queue = RequestQueue(self.api_key, self.base_url, requests_per_minute=rpm, session=session)

    @property
    def configured(self) -> bool:
        return bool(self.base_url)

    def request(self, method, endpoint, data=None):
        if not self.base_url:
            raise ImproperlyConfigured("PICQER_BASE_URL is not set")
        return self.queue.submit(method, endpoint, data).result()

    def _get_collection(self, endpoint) -> list[dict]:
        payload = self.request('GET', endpoint)
        if not isinstance(payload, list):
            raise PicqerApiError(
                f"Expected a list from /{endpoint}, got {type(payload).__name__}"
            )
        return payload

    def get_products(self) -> list[dict]:
        return self._get_collection('products')

    def get_picklists(self) -> list[dict]:
        return self._get_collection('picklists')

    def get_warehouses(self) -> list[dict]:
        return self._get_collection('warehouses')
