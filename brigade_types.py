"""
Type definitions for Brigade kitchen station fulfillment
"""
from enum import Enum


class CuisineType(Enum):
    """Types of cuisine"""
    ITALIAN = "italian"
    FRENCH = "french"
    CHINESE = "chinese"
    JAPANESE = "japanese"
    INDIAN = "indian"
    MEXICAN = "mexican"
    AMERICAN = "american"
    MEDITERRANEAN = "mediterranean"
    THAI = "thai"
    KOREAN = "korean"
    SPANISH = "spanish"
    GERMAN = "german"
    OTHER = "other"


class OrderStatus(Enum):
    """Order states within a fulfillment pass"""
    PENDING = "pending"
    FULFILLED = "fulfilled"


class EventKind(Enum):
    """Fulfillment trace events"""
    ORDER_STARTED = "order_started"
    ATTEMPT = "attempt"
    NOT_AVAILABLE = "not_available"
    INSUFFICIENT_STOCK = "insufficient_stock"
    INGREDIENT_WITHDRAWN = "ingredient_withdrawn"
    REPLENISHED = "replenished"
    REPLENISH_FAILED = "replenish_failed"
    REPLENISH_ROLLED_BACK = "replenish_rolled_back"
    PREPARED = "prepared"
    PREPARE_FAILED = "prepare_failed"
    NOT_PREPARED = "not_prepared"
    RUN_COMPLETE = "run_complete"


class ExportFormat(Enum):
    """Metrics export formats"""
    CSV = "csv"
    JSON = "json"
