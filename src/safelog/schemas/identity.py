"""Identity Pydantic v2 schemas.

Application user profile including stored payment card and postal address.
"""

from pydantic import Field

from safelog.core.sensitivity import SensitivityLevel, sensitive
from safelog.schemas.common import SafeRecord


class ApplicationUser(SafeRecord):
    """Application user profile with payment and address data."""

    id: str
    user_name: str
    email: str | None = Field(default=None, json_schema_extra=sensitive(SensitivityLevel.PII, "Email address"))
    phone_number: str | None = Field(default=None, json_schema_extra=sensitive(SensitivityLevel.PII, "Phone number"))
    card_number: str = Field(
        json_schema_extra=sensitive(SensitivityLevel.FINANCIAL, "Credit card number - must be masked in logs"),
    )
    security_number: str = Field(
        json_schema_extra=sensitive(SensitivityLevel.FINANCIAL, "Card security code - must never appear in logs"),
    )
    expiration: str = Field(
        pattern=r"^(0[1-9]|1[0-2])/[0-9]{2}$",
        json_schema_extra=sensitive(SensitivityLevel.FINANCIAL, "Card expiration date"),
    )
    card_holder_name: str = Field(json_schema_extra=sensitive(SensitivityLevel.PII, "Cardholder name"))
    card_type: int
    street: str = Field(json_schema_extra=sensitive(SensitivityLevel.PII, "Street address"))
    city: str = Field(json_schema_extra=sensitive(SensitivityLevel.PII, "City"))
    state: str = Field(json_schema_extra=sensitive(SensitivityLevel.PII, "State or province"))
    country: str = Field(json_schema_extra=sensitive(SensitivityLevel.PII, "Country"))
    zip_code: str = Field(json_schema_extra=sensitive(SensitivityLevel.PII, "Postal/ZIP code"))
    name: str = Field(json_schema_extra=sensitive(SensitivityLevel.PII, "User first name"))
    last_name: str = Field(json_schema_extra=sensitive(SensitivityLevel.PII, "User last name"))
