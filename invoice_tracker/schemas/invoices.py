"""
Pydantic schemas for the invoice endpoints.

Field names are snake_case (matching the store columns); JSON uses camelCase
aliases, so clients send and receive invoiceNumber, expiryDate, etc.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

CAMEL_CASE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Request models ---

class InvoiceCreateRequest(BaseModel):
    """
    Body of POST /invoices.

    Dates are kept as strings here; the service parses them and answers 400
    when either one is not a date.
    """
    model_config = CAMEL_CASE_CONFIG

    invoice_number: Optional[str] = Field(None, description="Free-form invoice number", examples=["INV1"])
    invoice_date: Optional[str] = Field(None, description="Invoice date", examples=["2024-01-01"])
    item_name: Optional[str] = Field(None, description="Item the invoice is for", examples=["Cake"])
    price: Optional[float] = Field(None, description="Price (no range or currency checks)", examples=[10])
    expiry_date: Optional[str] = Field(None, description="Expiry date", examples=["2024-01-05"])

    @field_validator("invoice_number", "item_name", mode="before")
    @classmethod
    def coerce_number_to_text(cls, value: Any) -> Any:
        # bool is an int subclass but is not a number here
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


# --- Record models ---

class InvoiceRecord(BaseModel):
    """
    A stored invoice with raw timestamps.

    Store rows are validated into this model before leaving the service layer.
    """
    model_config = CAMEL_CASE_CONFIG

    id: str = Field(..., description="Store-assigned identifier")
    invoice_number: Optional[str] = None
    invoice_date: datetime
    item_name: Optional[str] = None
    price: Optional[float] = None
    expiry_date: datetime
    done: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        if value is None:
            return value
        return str(value)


class InvoiceListItem(BaseModel):
    """
    Display copy of an invoice returned by GET /invoices.

    invoiceDate and expiryDate are YYYY-MM-DD strings, or "Invalid Date" when
    the stored value cannot be read back as a date.
    """
    model_config = CAMEL_CASE_CONFIG

    id: str
    invoice_number: Optional[str] = None
    invoice_date: str = Field(..., examples=["2024-01-01"])
    item_name: Optional[str] = None
    price: Optional[float] = None
    expiry_date: str = Field(..., examples=["2024-01-05"])
    done: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        if value is None:
            return value
        return str(value)


# --- Response models ---

class InvoiceDeleteResponse(BaseModel):
    """Response of DELETE /invoices/{id}; sent whether or not the invoice existed."""
    message: str = Field(
        "Invoice deleted",
        description="Confirmation message",
        examples=["Invoice deleted"]
    )


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx answer produced by the exception handlers."""
    error: str = Field(..., description="Machine-readable error code", examples=["invalid_date"])
    message: str = Field(..., description="Human-readable message", examples=["Invalid date format."])
