"""
Human readable rendering of a fulfillment report.
"""

from typing import List

from brigade_types import EventKind
from kitchen.engine import FulfillmentEvent, FulfillmentReport

DETAIL_KINDS = (EventKind.INGREDIENT_WITHDRAWN, EventKind.REPLENISH_ROLLED_BACK)


def render_event(event: FulfillmentEvent) -> str:
    kind = event.kind
    if kind == EventKind.ORDER_STARTED:
        return f"PREPARING DISH: {event.dish}"
    if kind == EventKind.ATTEMPT:
        return f"{event.station} attempting to prepare {event.dish}..."
    if kind == EventKind.NOT_AVAILABLE:
        return f"{event.station}: Dish not available. Moving to next station..."
    if kind == EventKind.INSUFFICIENT_STOCK:
        return f"{event.station}: Insufficient ingredients. Replenishing ingredients..."
    if kind == EventKind.INGREDIENT_WITHDRAWN:
        return f"{event.station}: Took {event.quantity} {event.ingredient} from backup."
    if kind == EventKind.REPLENISH_ROLLED_BACK:
        return f"{event.station}: Returned {event.quantity} {event.ingredient} to backup."
    if kind == EventKind.REPLENISHED:
        return f"{event.station}: Ingredients replenished."
    if kind == EventKind.REPLENISH_FAILED:
        return f"{event.station}: Unable to replenish ingredients. Failed to prepare {event.dish}."
    if kind == EventKind.PREPARED:
        return f"{event.station}: Successfully prepared {event.dish}."
    if kind == EventKind.PREPARE_FAILED:
        return f"{event.station}: Unable to prepare {event.dish}."
    if kind == EventKind.NOT_PREPARED:
        return f"{event.dish} was not prepared."
    return "All dishes have been processed."


def render_trace(report: FulfillmentReport, verbose: bool = False) -> List[str]:
    """One line per event; ingredient-level lines only when ``verbose``."""
    return [
        render_event(event)
        for event in report.events
        if verbose or event.kind not in DETAIL_KINDS
    ]
