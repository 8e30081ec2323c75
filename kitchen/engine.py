"""
Order fulfillment engine: walks the station registry for each queued order,
tops stations up from backup stock and requeues what nobody could cook.
"""

from typing import Dict, List, Optional, Any, Tuple
from dataclasses import dataclass, field
from datetime import datetime
import logging

from brigade_types import EventKind, OrderStatus
from config import KitchenConfig, get_settings
from kitchen.backup import BackupInventory
from kitchen.orders import Order, OrderQueue
from kitchen.registry import StationRegistry
from kitchen.station import KitchenStation
from recipes.dish import required_totals
from recipes.ingredient import Ingredient

logger = logging.getLogger(__name__)


@dataclass
class FulfillmentEvent:
    """One step of a fulfillment pass."""
    kind: EventKind
    dish: str
    order_id: str
    station: Optional[str] = None
    ingredient: Optional[str] = None
    quantity: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "dish": self.dish,
            "order_id": self.order_id,
            "station": self.station,
            "ingredient": self.ingredient,
            "quantity": self.quantity
        }


@dataclass
class OrderOutcome:
    """How a single order ended up after a pass."""
    order_id: str
    dish: str
    status: OrderStatus
    station: Optional[str] = None
    stations_tried: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "order_id": self.order_id,
            "dish": self.dish,
            "status": self.status.value,
            "station": self.station,
            "stations_tried": list(self.stations_tried)
        }


@dataclass
class FulfillmentReport:
    """Events and outcomes from one fulfillment pass."""
    started_at: datetime = field(default_factory=datetime.now)
    finished_at: Optional[datetime] = None
    events: List[FulfillmentEvent] = field(default_factory=list)
    outcomes: List[OrderOutcome] = field(default_factory=list)

    @property
    def fulfilled(self) -> List[OrderOutcome]:
        return [o for o in self.outcomes if o.status == OrderStatus.FULFILLED]

    @property
    def requeued(self) -> List[OrderOutcome]:
        return [o for o in self.outcomes if o.status == OrderStatus.PENDING]

    def events_of(self, kind: EventKind) -> List[FulfillmentEvent]:
        return [e for e in self.events if e.kind == kind]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "started_at": self.started_at.isoformat(),
            "finished_at": self.finished_at.isoformat() if self.finished_at else None,
            "orders": len(self.outcomes),
            "fulfilled": len(self.fulfilled),
            "requeued": len(self.requeued),
            "events": [e.to_dict() for e in self.events],
            "outcomes": [o.to_dict() for o in self.outcomes]
        }


class FulfillmentEngine:
    """Drives orders through the station registry.

    Stations are tried in registry order and the first one that can cook the
    dish, directly or after pulling missing stock from backup, wins. Orders
    no station could cook go back on the queue in their original order.

    Single-writer: shortfall computation, withdrawal and replenishment are not
    guarded, so only one pass may touch a given registry/backup at a time.
    """

    def __init__(
        self,
        registry: StationRegistry,
        backup: BackupInventory,
        queue: OrderQueue,
        settings: Optional[KitchenConfig] = None
    ):
        self.registry = registry
        self.backup = backup
        self.queue = queue
        self.settings = settings or get_settings().kitchen

    def process_all(self) -> FulfillmentReport:
        """Attempt every queued order exactly once."""
        report = FulfillmentReport()
        pending = self.queue.drain()
        unprepared: List[Order] = []

        logger.info(f"Processing {len(pending)} orders across {len(self.registry)} stations")

        for order in pending:
            if not self._process_order(order, report):
                unprepared.append(order)

        self.queue.replace(unprepared)
        report.finished_at = datetime.now()
        report.events.append(FulfillmentEvent(EventKind.RUN_COMPLETE, dish="", order_id=""))

        logger.info(
            f"All dishes have been processed: {len(report.fulfilled)} prepared, "
            f"{len(report.requeued)} requeued"
        )
        return report

    def prepare_next(self) -> bool:
        """Cook the order at the head of the queue from station stock alone.

        No backup stock is used. On failure the order stays at the head.
        """
        order = self.queue.peek()
        if order is None:
            return False

        for station in self.registry:
            if station.can_complete_order(order.dish_name) and station.prepare_dish(order.dish_name):
                self.queue.dequeue()
                logger.info(f"{station.name} prepared {order.dish_name}")
                return True
        return False

    def _process_order(self, order: Order, report: FulfillmentReport) -> bool:
        dish = order.dish
        outcome = OrderOutcome(order_id=order.order_id, dish=dish.name, status=OrderStatus.PENDING)
        report.outcomes.append(outcome)
        self._emit(report, EventKind.ORDER_STARTED, order)

        for station in self.registry:
            outcome.stations_tried.append(station.name)
            if self._attempt_station(station, order, report):
                outcome.status = OrderStatus.FULFILLED
                outcome.station = station.name
                return True

        self._emit(report, EventKind.NOT_PREPARED, order)
        logger.warning(f"{dish.name} was not prepared")
        return False

    def _attempt_station(self, station: KitchenStation, order: Order, report: FulfillmentReport) -> bool:
        dish_name = order.dish_name
        self._emit(report, EventKind.ATTEMPT, order, station)

        if not station.has_dish(dish_name):
            self._emit(report, EventKind.NOT_AVAILABLE, order, station)
            return False

        if station.can_complete_order(dish_name):
            return self._prepare(station, order, report)

        self._emit(report, EventKind.INSUFFICIENT_STOCK, order, station)
        if not self._replenish(station, order, report):
            self._emit(report, EventKind.REPLENISH_FAILED, order, station)
            return False

        self._emit(report, EventKind.REPLENISHED, order, station)
        return self._prepare(station, order, report)

    def _prepare(self, station: KitchenStation, order: Order, report: FulfillmentReport) -> bool:
        if station.prepare_dish(order.dish_name):
            self._emit(report, EventKind.PREPARED, order, station)
            return True
        self._emit(report, EventKind.PREPARE_FAILED, order, station)
        return False

    def _replenish(self, station: KitchenStation, order: Order, report: FulfillmentReport) -> bool:
        """Pull each missing quantity of the order's dish from backup.

        Stops at the first ingredient backup cannot supply. Stock already
        moved stays at the station unless rollback is configured.
        """
        applied: List[Tuple[str, int, float]] = []

        for name, required in required_totals(order.dish).items():
            shortfall = required - station.quantity_of(name)
            if shortfall <= 0:
                continue

            withdrawn = self.backup.withdraw(name, shortfall)
            if withdrawn is None:
                if applied and self.settings.rollback_partial_replenishment:
                    self._roll_back(station, applied, order, report)
                return False

            station.replenish(withdrawn)
            applied.append((withdrawn.name, withdrawn.quantity, withdrawn.price))
            self._emit(
                report, EventKind.INGREDIENT_WITHDRAWN, order, station,
                ingredient=withdrawn.name, quantity=withdrawn.quantity
            )

        return True

    def _roll_back(self, station: KitchenStation, applied: List[Tuple[str, int, float]],
                   order: Order, report: FulfillmentReport):
        for name, quantity, price in applied:
            if station.release(name, quantity):
                self.backup.add(Ingredient(name, quantity=quantity, price=price))
                self._emit(
                    report, EventKind.REPLENISH_ROLLED_BACK, order, station,
                    ingredient=name, quantity=quantity
                )

    def _emit(
        self,
        report: FulfillmentReport,
        kind: EventKind,
        order: Order,
        station: Optional[KitchenStation] = None,
        ingredient: Optional[str] = None,
        quantity: int = 0
    ):
        event = FulfillmentEvent(
            kind=kind,
            dish=order.dish_name,
            order_id=order.order_id,
            station=station.name if station else None,
            ingredient=ingredient,
            quantity=quantity
        )
        report.events.append(event)
        logger.debug(f"{kind.value}: dish={event.dish} station={event.station} ingredient={ingredient} qty={quantity}")

