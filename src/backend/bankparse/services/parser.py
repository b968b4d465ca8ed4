"""
Notification parser service for extracting transaction data from bank app notifications.
"""

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Optional
import logging
import re

from bankparse.models.notification import ParsedNotification, RawNotification, TransactionType
from bankparse.services.dispatcher import select_vendor
from bankparse.services.vendor_rules import (
    TextSource,
    Vendor,
    VendorProfile,
    VendorRule,
    VENDOR_PROFILES,
)
from bankparse.utils.extractors import extract_amount, extract_card_last_four, extract_merchant
from bankparse.utils.money import parse_brl_amount
from bankparse.utils.text import merchant_or_none

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VendorMatch:
    """Fields extracted by a vendor rule."""
    rule: VendorRule
    amount: Decimal
    merchant: Optional[str]


class NotificationParser:
    """Service for parsing bank notifications into structured transaction data."""

    # Generic fallback confidence by what was found
    GENERIC_CONFIDENCE = MappingProxyType({
        'amount_and_merchant': 0.6,
        'amount_only': 0.4,
        'nothing': 0.1,
    })

    def parse(self, package_name: str, title: str, content: str) -> ParsedNotification:
        """
        Parse notification text and extract transaction details.

        Never raises: anything that cannot be extracted lowers the confidence
        of the result instead.

        Args:
            package_name: Package of the app that posted the notification
            title: Notification title
            content: Notification body

        Returns:
            ParsedNotification with amount, merchant, card suffix, confidence
            and transaction type
        """
        title = title if isinstance(title, str) else ''
        content = content if isinstance(content, str) else ''

        try:
            vendor = select_vendor(package_name)
            profile = VENDOR_PROFILES[vendor]
            full_text = f"{title} {content}"

            if vendor is not Vendor.GENERIC:
                match = self._match_vendor(profile, full_text, content)
                if match:
                    return self._build_vendor_result(profile, match, title, full_text)

                logger.debug("No vendor rule matched, using generic parser", extra={
                    "vendor": vendor.value
                })

            return self._parse_generic(full_text)

        except (re.error, ValueError, TypeError, ArithmeticError):
            logger.warning("Error parsing notification", exc_info=True, extra={
                "package_name": package_name
            })
            return ParsedNotification.empty()

    def parse_notification(self, notification: RawNotification) -> ParsedNotification:
        """Parse a RawNotification, preferring its expanded text."""
        return self.parse(notification.package_name, notification.title, notification.content)

    def _match_vendor(self, profile: VendorProfile, full_text: str, content: str) -> Optional[VendorMatch]:
        """Try a vendor's rules in order; first rule with a parseable amount wins."""
        text = content if profile.source == TextSource.BODY else full_text

        for rule in profile.rules:
            match = rule.spec.search(text)
            if not match:
                continue

            amount = parse_brl_amount(match.group(rule.amount_group))
            if amount is None:
                continue

            merchant = None
            if rule.merchant_group is not None:
                raw_merchant = match.group(rule.merchant_group)
                if rule.merchant_strip is not None:
                    raw_merchant = rule.merchant_strip.sub('', raw_merchant)
                merchant = merchant_or_none(raw_merchant)

            if rule.require_merchant and merchant is None:
                continue

            logger.debug("Vendor rule matched", extra={"pattern": rule.spec.name})
            return VendorMatch(rule=rule, amount=amount, merchant=merchant)

        return None

    def _build_vendor_result(
        self,
        profile: VendorProfile,
        match: VendorMatch,
        title: str,
        full_text: str,
    ) -> ParsedNotification:
        if profile.direction is not None:
            transaction_type = profile.direction.resolve(title)
        else:
            transaction_type = match.rule.transaction_type

        card_last_four = extract_card_last_four(full_text) if profile.extract_card else None

        return ParsedNotification(
            amount=match.amount,
            merchant=match.merchant,
            card_last_four=card_last_four,
            confidence=match.rule.confidence,
            transaction_type=transaction_type,
        )

    def _parse_generic(self, full_text: str) -> ParsedNotification:
        """Best-effort extraction for unknown apps and unmatched vendor text."""
        amount = extract_amount(full_text)
        merchant = extract_merchant(full_text)
        card_last_four = extract_card_last_four(full_text)

        if amount is not None and merchant is not None:
            confidence = self.GENERIC_CONFIDENCE['amount_and_merchant']
        elif amount is not None:
            confidence = self.GENERIC_CONFIDENCE['amount_only']
        else:
            confidence = self.GENERIC_CONFIDENCE['nothing']

        return ParsedNotification(
            amount=amount,
            merchant=merchant,
            card_last_four=card_last_four,
            confidence=confidence,
            transaction_type=TransactionType.UNKNOWN,
        )


_default_parser = NotificationParser()


def parse(package_name: str, title: str, content: str) -> ParsedNotification:
    """Module-level shortcut around a shared NotificationParser."""
    return _default_parser.parse(package_name, title, content)
