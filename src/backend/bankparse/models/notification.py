"""
Pydantic models for bank notifications.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Kind of transaction a notification describes."""
    PURCHASE = "PURCHASE"  # Regular card purchase
    PIX_SENT = "PIX_SENT"
    PIX_RECEIVED = "PIX_RECEIVED"
    TRANSFER = "TRANSFER"
    UNKNOWN = "UNKNOWN"


class NotificationStatus(str, Enum):
    """Review status of a captured notification."""
    PENDING = "PENDING"  # Waiting for user review
    PROCESSED = "PROCESSED"  # User confirmed and created transaction
    IGNORED = "IGNORED"  # User explicitly ignored
    FAILED = "FAILED"  # Parser could not extract info
    DUPLICATE = "DUPLICATE"


class RawNotification(BaseModel):
    """Notification text as delivered by the platform listener."""
    package_name: str
    title: str = ""
    body: str = ""
    big_text: Optional[str] = None  # Expanded text, preferred over body

    class Config:
        frozen = True

    @property
    def content(self) -> str:
        if self.big_text and self.big_text.strip():
            return self.big_text
        return self.body


class ParsedNotification(BaseModel):
    """Result of parsing a notification."""
    amount: Optional[Decimal] = Field(default=None, ge=0)
    merchant: Optional[str] = Field(default=None, max_length=50)
    card_last_four: Optional[str] = Field(default=None, pattern=r'^[0-9]{4}$')
    confidence: float = Field(default=0.1, ge=0.0, le=1.0)
    transaction_type: TransactionType = TransactionType.UNKNOWN

    class Config:
        frozen = True

    @field_validator('merchant')
    @classmethod
    def blank_merchant_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    @classmethod
    def empty(cls) -> "ParsedNotification":
        """Result for text with nothing extractable."""
        return cls()


class CaptureDecision(BaseModel):
    """Whether a notification should be stored for review, and how."""
    captured: bool
    package_name: str
    display_name: str
    reason: Optional[str] = None  # Why it was skipped
    status: Optional[NotificationStatus] = None
    needs_review: bool = True
    display_amount: Optional[str] = None
    parsed: Optional[ParsedNotification] = None
