"""
Static table of supported bank apps.
"""

from pydantic import BaseModel
from typing import Optional


class BankAppConfig(BaseModel):
    """A bank app whose notifications are monitored."""
    package_name: str
    display_name: str
    is_enabled: bool = True

    class Config:
        frozen = True


DEFAULT_BANK_APPS: tuple[BankAppConfig, ...] = (
    BankAppConfig(package_name="com.nu.production", display_name="Nubank"),
    BankAppConfig(package_name="com.itau", display_name="Itaú"),
    BankAppConfig(package_name="com.bradesco", display_name="Bradesco"),
    BankAppConfig(package_name="br.com.bb.android", display_name="Banco do Brasil"),
    BankAppConfig(package_name="com.santander.app", display_name="Santander"),
    BankAppConfig(package_name="br.com.intermedium", display_name="Inter"),
    BankAppConfig(package_name="com.c6bank.app", display_name="C6 Bank"),
    BankAppConfig(package_name="com.picpay", display_name="PicPay"),
    BankAppConfig(package_name="br.com.mercadopago.wallet", display_name="Mercado Pago"),
    BankAppConfig(package_name="com.google.android.apps.walletnfcrel", display_name="Google Wallet"),
    # Some devices post wallet notifications from Play Services
    BankAppConfig(package_name="com.google.android.gms", display_name="Google Pay"),
)

SUPPORTED_PACKAGES = frozenset(app.package_name for app in DEFAULT_BANK_APPS)


def is_supported_package(package_name: Optional[str]) -> bool:
    """Check if a package is a supported bank app (exact, case-sensitive)."""
    return package_name in SUPPORTED_PACKAGES


def get_bank_app(package_name: str) -> Optional[BankAppConfig]:
    for app in DEFAULT_BANK_APPS:
        if app.package_name == package_name:
            return app
    return None


def get_display_name(package_name: str) -> str:
    """
    Get the display name for a package.

    Unknown packages fall back to the last dotted segment
    (e.g., "com.example.bank" -> "bank").
    """
    app = get_bank_app(package_name)
    if app:
        return app.display_name
    return package_name.rsplit('.', 1)[-1]
