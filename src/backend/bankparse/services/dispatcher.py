"""
Maps notification package names to vendor rule sets.
"""

from types import MappingProxyType
from typing import Mapping
import logging

from bankparse.services.vendor_rules import Vendor, VendorProfile, VendorRule, VENDOR_PROFILES

logger = logging.getLogger(__name__)

# Exact, case-sensitive package names. A vendor may ship several apps.
VENDOR_PACKAGES: Mapping[Vendor, frozenset[str]] = MappingProxyType({
    Vendor.GOOGLE_WALLET: frozenset({
        "com.google.android.apps.walletnfcrel",
        "com.google.android.gms",
    }),
    Vendor.NUBANK: frozenset({"com.nu.production"}),
    Vendor.ITAU: frozenset({"com.itau"}),
    Vendor.BRADESCO: frozenset({"com.bradesco"}),
    Vendor.BANCO_DO_BRASIL: frozenset({"br.com.bb.android"}),
    Vendor.SANTANDER: frozenset({"com.santander.app"}),
    Vendor.INTER: frozenset({"br.com.intermedium"}),
    Vendor.C6_BANK: frozenset({"com.c6bank.app"}),
    Vendor.PICPAY: frozenset({"com.picpay"}),
    Vendor.MERCADO_PAGO: frozenset({"br.com.mercadopago.wallet"}),
})

_PACKAGE_TO_VENDOR: Mapping[str, Vendor] = MappingProxyType({
    package: vendor
    for vendor, packages in VENDOR_PACKAGES.items()
    for package in packages
})


def select_vendor(package_name: str) -> Vendor:
    """
    Select the vendor for a package name.

    Args:
        package_name: Android package that posted the notification

    Returns:
        Matching Vendor, or Vendor.GENERIC for unknown packages
    """
    vendor = _PACKAGE_TO_VENDOR.get(package_name, Vendor.GENERIC)
    logger.debug("Selected vendor", extra={"package_name": package_name, "vendor": vendor.value})
    return vendor


def profile_for_package(package_name: str) -> VendorProfile:
    return VENDOR_PROFILES[select_vendor(package_name)]


def rules_for_package(package_name: str) -> tuple[VendorRule, ...]:
    """Ordered rules for a package; empty for the generic fallback."""
    return profile_for_package(package_name).rules
