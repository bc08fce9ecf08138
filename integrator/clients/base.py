from abc import ABC, abstractmethod

ENTITIES = ('products', 'picklists', 'warehouses')


class BaseClient(ABC):
    @abstractmethod
    def get_products(self) -> list[dict]:
        """Return every product known to the remote API."""

    @abstractmethod
    def get_picklists(self) -> list[dict]:
        """Return every picklist known to the remote API."""

    @abstractmethod
    def get_warehouses(self) -> list[dict]:
        """Return every warehouse known to the remote API."""

    @property
    def configured(self) -> bool:
        return True

    def fetch(self, entity) -> list[dict]:
        if entity not in ENTITIES:
            raise ValueError(f"Unknown entity type: {entity}")
        return getattr(self, f'get_{entity}')()
