"""
Kitchen stations, backup stock, order queue and the fulfillment engine.
"""

from .station import KitchenStation
from .registry import StationRegistry
from .backup import BackupInventory
from .orders import Order, OrderQueue
from .engine import FulfillmentEngine, FulfillmentEvent, FulfillmentReport, OrderOutcome
from .manager import StationManager
from .trace import render_trace

__all__ = [
    "KitchenStation",
    "StationRegistry",
    "BackupInventory",
    "Order",
    "OrderQueue",
    "FulfillmentEngine",
    "FulfillmentEvent",
    "FulfillmentReport",
    "OrderOutcome",
    "StationManager",
    "render_trace"
]
