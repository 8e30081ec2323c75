"""
FIFO order queue.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, Iterator, List, Optional
import uuid

from recipes.dish import Recipe


@dataclass
class Order:
    """A request to cook one dish."""
    dish: Recipe
    order_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])

    @property
    def dish_name(self) -> str:
        return self.dish.name


class OrderQueue:
    """Pending orders, first in first out."""

    def __init__(self, orders: Optional[Iterable[Order]] = None):
        self._orders: Deque[Order] = deque(orders or [])

    def __len__(self) -> int:
        return len(self._orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(list(self._orders))

    def __bool__(self) -> bool:
        return bool(self._orders)

    def enqueue(self, order: Order):
        self._orders.append(order)

    def peek(self) -> Optional[Order]:
        return self._orders[0] if self._orders else None

    def dequeue(self) -> Optional[Order]:
        return self._orders.popleft() if self._orders else None

    def drain(self) -> List[Order]:
        """Remove and return every order, oldest first."""
        orders = list(self._orders)
        self._orders.clear()
        return orders

    def replace(self, orders: Iterable[Order]):
        self._orders = deque(orders)

    def dish_names(self) -> List[str]:
        return [order.dish_name for order in self._orders]

    def clear(self):
        self._orders.clear()
