from typing import Generic, Iterable, List, Optional, TypeVar

from pydantic import BaseModel

from .models import Brand, Product, Token, User

# In-memory stores. One Catalog per app instance, handed to routes via app.state.

T = TypeVar("T", bound=BaseModel)


class IdAllocator:
    """Hands out sequential string ids ("1", "2", ...)."""

    def __init__(self, start: int = 1):
        self._start = start
        self._next = start

    def next(self) -> str:
        value = str(self._next)
        self._next += 1
        return value

    def reset(self, start: Optional[int] = None) -> None:
        self._next = self._start if start is None else start


class EntityStore(Generic[T]):
    def __init__(self):
        self._ids = IdAllocator()
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def add_one(self, item: T) -> T:
        stored = item.model_copy(update={"id": self._ids.next()})
        self._items.append(stored)
        return stored

    def add_all(self, items: Iterable[T]) -> List[T]:
        return [self.add_one(item) for item in items]

    def get_all(self) -> List[T]:
        return list(self._items)

    def get_by_id(self, item_id: str) -> Optional[T]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    # test support
    def remove_all(self) -> None:
        self._items.clear()

    def reset_id(self) -> None:
        self._ids.reset()


class Catalog:
    def __init__(self):
        self.products: EntityStore[Product] = EntityStore()
        self.brands: EntityStore[Brand] = EntityStore()
        self.users: EntityStore[User] = EntityStore()
        self.tokens: EntityStore[Token] = EntityStore()

    @property
    def stores(self) -> List[EntityStore]:
        return [self.products, self.brands, self.users, self.tokens]

    def load(self, products: Iterable[Product] = (), brands: Iterable[Brand] = (), users: Iterable[User] = ()) -> None:
        self.products.add_all(products)
        self.brands.add_all(brands)
        self.users.add_all(users)

    def reset(self) -> None:
        for store in self.stores:
            store.remove_all()
            store.reset_id()
