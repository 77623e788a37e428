# shopapi/utils/fallback.py

import copy
from datetime import datetime, timezone


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


# Демо-данные, с которыми стартует хранилище в памяти
SEED_CUSTOMERS = [
    {
        "id": "1",
        "name": "Alice Johnson",
        "phone": "+1 (555) 123-4567",
        "address": "House 123, Road 15, Block 304, Springfield",
        "home": "123",
        "road": "15",
        "block": "304",
        "town": "Springfield",
        "created_at": _ts("2024-01-10T10:00:00"),
        "updated_at": _ts("2024-01-10T10:00:00"),
    },
    {
        "id": "2",
        "name": "Bob Smith",
        "phone": "+1 (555) 234-5678",
        "address": "House 456, Road 22, Block 205, Manama",
        "home": "456",
        "road": "22",
        "block": "205",
        "town": "Manama",
        "created_at": _ts("2024-01-12T14:30:00"),
        "updated_at": _ts("2024-01-12T14:30:00"),
    },
    {
        "id": "3",
        "name": "Carol Davis",
        "phone": "+1 (555) 345-6789",
        "address": "House 789, Road 33, Block 102, Riffa",
        "home": "789",
        "road": "33",
        "block": "102",
        "town": "Riffa",
        "created_at": _ts("2024-01-14T09:15:00"),
        "updated_at": _ts("2024-01-14T09:15:00"),
    },
]

SEED_ORDERS = [
    {
        "id": "1",
        "customer_id": "1",
        "items": [{"productId": "1", "variantId": None, "quantity": 1, "price": 35.0}],
        "total": 35.0,
        "status": "delivered",
        "delivery_type": "delivery",
        "notes": None,
        "created_at": _ts("2024-01-15T10:00:00"),
        "updated_at": _ts("2024-01-15T15:30:00"),
    },
    {
        "id": "2",
        "customer_id": "2",
        "items": [{"productId": "2", "variantId": None, "quantity": 1, "price": 17.5}],
        "total": 17.5,
        "status": "processing",
        "delivery_type": "pickup",
        "notes": None,
        "created_at": _ts("2024-01-15T11:00:00"),
        "updated_at": _ts("2024-01-15T11:00:00"),
    },
]


class FallbackStorage:
    """
    Хранилище в памяти процесса. Подменяет базу, когда она не настроена
    или недоступна. Записи хранятся как dict с теми же ключами, что и
    колонки таблиц; наружу отдаются копии.
    """

    COLLECTIONS = ("customers", "products", "orders", "categories")

    def __init__(self, seed: bool = True):
        self.collections = {name: [] for name in self.COLLECTIONS}
        if seed:
            self.collections["customers"] = copy.deepcopy(SEED_CUSTOMERS)
            self.collections["orders"] = copy.deepcopy(SEED_ORDERS)

    def _index(self, name: str, id: str) -> int:
        normalized = str(id).strip()
        for i, record in enumerate(self.collections[name]):
            if str(record["id"]).strip() == normalized:
                return i
        return -1

    def all(self, name: str) -> list[dict]:
        return copy.deepcopy(self.collections[name])

    def get(self, name: str, id: str) -> dict | None:
        i = self._index(name, id)
        if i == -1:
            return None
        return copy.deepcopy(self.collections[name][i])

    def insert(self, name: str, record: dict) -> dict:
        self.collections[name].append(copy.deepcopy(record))
        return copy.deepcopy(record)

    def update(self, name: str, id: str, values: dict) -> dict | None:
        i = self._index(name, id)
        if i == -1:
            return None
        self.collections[name][i].update(copy.deepcopy(values))
        return copy.deepcopy(self.collections[name][i])

    def delete(self, name: str, id: str) -> bool:
        i = self._index(name, id)
        if i == -1:
            return False
        del self.collections[name][i]
        return True
