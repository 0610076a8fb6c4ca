import math
import re
from typing import Any, Literal

from pydantic import BaseModel, model_validator

from .models import AD_TYPES

_LEADING_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def is_truthy(value: Any) -> bool:
    """JavaScript truthiness for decoded JSON values."""
    if value is None or value is False:
        return False
    if isinstance(value, int):
        return value != 0
    if isinstance(value, float):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def _as_text(value: Any) -> str:
    # String(x) for JSON values; arrays join their items with commas
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ",".join(_as_text(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def parse_float(value: Any) -> float:
    """
    Lenient float conversion: numbers pass through, anything else is turned
    into text and gives its leading decimal literal. No literal, or a
    non-finite result, is NaN.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            result = float(value)
        except OverflowError:
            return math.nan
    else:
        match = _LEADING_FLOAT.match(_as_text(value).lstrip())
        if match is None:
            return math.nan
        result = float(match.group())
    return result if math.isfinite(result) else math.nan


class AdCreate(BaseModel):
    user: Any = None
    price: Any = None
    amount: Any = None
    type: Any = None

    @model_validator(mode="after")
    def check_fields(self) -> "AdCreate":
        if not (is_truthy(self.user) and is_truthy(self.price) and is_truthy(self.amount)):
            raise ValueError("user, price and amount are required")
        if not isinstance(self.type, str) or self.type not in AD_TYPES:
            raise ValueError("type must be 'buy' or 'sell'")
        self.price = parse_float(self.price)
        self.amount = parse_float(self.amount)
        return self


class AdResponse(BaseModel):
    id: int
    user: str
    price: float
    amount: float
    type: Literal["buy", "sell"]

    class Config:
        from_attributes = True
