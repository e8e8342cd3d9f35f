"""Shopping basket Pydantic v2 schemas.

Defines the customer basket record and its line items as they appear in
basket service logs.
"""

from decimal import Decimal

from pydantic import Field

from safelog.core.sensitivity import SensitivityLevel, sensitive
from safelog.schemas.common import SafeRecord


class BasketItem(SafeRecord):
    """A single product line in a customer basket."""

    id: str
    product_id: int
    product_name: str
    unit_price: Decimal = Field(ge=0)
    old_unit_price: Decimal | None = Field(default=None, ge=0)
    quantity: int = Field(ge=1)
    picture_url: str | None = None


class CustomerBasket(SafeRecord):
    """A customer's basket keyed by buyer identifier."""

    buyer_id: str = Field(json_schema_extra=sensitive(SensitivityLevel.PII, "Buyer/Customer identifier"))
    items: list[BasketItem] = Field(default_factory=list)
