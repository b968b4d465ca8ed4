"""
Decides which incoming notifications are worth storing for review.
"""

import logging
from typing import Optional

from bankparse.config import Settings, settings as default_settings
from bankparse.models.bank_app import SUPPORTED_PACKAGES, get_display_name
from bankparse.models.notification import (
    CaptureDecision,
    NotificationStatus,
    RawNotification,
)
from bankparse.services.parser import NotificationParser
from bankparse.utils.money import format_brl

logger = logging.getLogger(__name__)


class CaptureService:
    """Service for triaging notifications before they reach storage."""

    def __init__(self, settings: Optional[Settings] = None, parser: Optional[NotificationParser] = None):
        self.settings = settings or default_settings
        self.parser = parser or NotificationParser()

    @property
    def enabled_packages(self) -> frozenset[str]:
        """Monitored packages; defaults to every supported bank app."""
        if self.settings.ENABLED_PACKAGES:
            return frozenset(self.settings.ENABLED_PACKAGES)
        return SUPPORTED_PACKAGES

    def triage(self, notification: RawNotification) -> CaptureDecision:
        """
        Parse a notification and decide whether to capture it.

        Args:
            notification: Raw notification from the platform listener

        Returns:
            CaptureDecision; skipped decisions carry a reason
        """
        package_name = notification.package_name
        display_name = get_display_name(package_name)

        def skip(reason: str, parsed=None) -> CaptureDecision:
            logger.debug("Skipping notification", extra={
                "package_name": package_name,
                "reason": reason
            })
            return CaptureDecision(
                captured=False,
                package_name=package_name,
                display_name=display_name,
                reason=reason,
                parsed=parsed,
            )

        if not self.settings.LISTENER_ENABLED:
            return skip("listener_disabled")

        if package_name not in self.enabled_packages:
            return skip("package_not_monitored")

        content = notification.content
        if not notification.title.strip() and not content.strip():
            return skip("empty_notification")

        parsed = self.parser.parse(package_name, notification.title, content)

        if parsed.amount is None and parsed.confidence < self.settings.CAPTURE_MIN_CONFIDENCE:
            return skip("unparseable", parsed)

        status = NotificationStatus.PENDING if parsed.amount is not None else NotificationStatus.FAILED
        needs_review = parsed.confidence < self.settings.REVIEW_CONFIDENCE_THRESHOLD

        logger.info("Captured notification", extra={
            "package_name": package_name,
            "status": status.value,
            "transaction_type": parsed.transaction_type.value,
            "confidence": parsed.confidence,
            "needs_review": needs_review
        })

        return CaptureDecision(
            captured=True,
            package_name=package_name,
            display_name=display_name,
            status=status,
            needs_review=needs_review,
            display_amount=format_brl(parsed.amount) if parsed.amount is not None else None,
            parsed=parsed,
        )
