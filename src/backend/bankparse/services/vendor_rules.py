"""
Per-vendor extraction rules for bank notifications.

Each vendor owns an ordered tuple of rules. A rule binds one pattern to the
capture groups holding the amount and the merchant, a fixed confidence and a
transaction type. Rules are tried top to bottom and the first one yielding a
parseable amount wins.

Confidence values:
- 0.95: Nubank and Itaú templates (stable, very specific wording)
- 0.90: Google Wallet templates, Itaú amount without counterparty
- 0.85: other banks (shorter, more generic wording)
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional
import re

from bankparse.models.notification import TransactionType
from bankparse.utils.patterns import PatternSpec, AMOUNT, CURRENCY, REST


class Vendor(str, Enum):
    """Bank apps with a dedicated rule set."""
    GOOGLE_WALLET = "google_wallet"
    NUBANK = "nubank"
    ITAU = "itau"
    BRADESCO = "bradesco"
    BANCO_DO_BRASIL = "banco_do_brasil"
    SANTANDER = "santander"
    INTER = "inter"
    C6_BANK = "c6_bank"
    PICPAY = "picpay"
    MERCADO_PAGO = "mercado_pago"
    GENERIC = "generic"


class TextSource(str, Enum):
    """Which part of the notification a vendor's rules run against."""
    FULL = "full"  # "title body"
    BODY = "body"


@dataclass(frozen=True)
class VendorRule:
    """One extraction pattern and the shape of its result."""
    spec: PatternSpec
    confidence: float
    transaction_type: TransactionType = TransactionType.PURCHASE
    amount_group: int = 1
    merchant_group: Optional[int] = 2
    # Removed from the raw merchant capture before cleaning
    merchant_strip: Optional[re.Pattern] = None
    # Skip the rule when the cleaned merchant is blank
    require_merchant: bool = False


@dataclass(frozen=True)
class TitleDirection:
    """Transaction direction decided by an exact title match."""
    title: str
    on_match: TransactionType
    otherwise: TransactionType

    def resolve(self, title: str) -> TransactionType:
        return self.on_match if title == self.title else self.otherwise


@dataclass(frozen=True)
class VendorProfile:
    """Everything the parser needs to know about one vendor."""
    rules: tuple[VendorRule, ...] = ()
    source: TextSource = TextSource.FULL
    extract_card: bool = False
    direction: Optional[TitleDirection] = None


# ========== Shared patterns ==========

_C = CURRENCY
_A = AMOUNT

COMPRA_APROVADA_EM = PatternSpec(
    name='compra_aprovada_em',
    pattern=r'Compra\s{1,5}(?:aprovada\s{1,5})?(?:de\s{1,5})?' + _C + _A + r'\s{1,5}(?:em|no)\s{1,5}' + REST,
    example='Compra aprovada de R$ 45,90 em MERCADO',
)

COMPRA_EM = PatternSpec(
    name='compra_em',
    pattern=r'Compra\s{1,5}(?:de\s{1,5})?' + _C + _A + r'\s{1,5}(?:em|no)\s{1,5}' + REST,
    example='Compra de R$ 45,90 no POSTO',
)

AMOUNT_DASH = PatternSpec(
    name='amount_dash',
    pattern=_C + _A + r'\s{1,5}[-–]\s{1,5}' + REST,
    example='R$ 45,90 - MERCADO',
)

PAGAMENTO_PARA = PatternSpec(
    name='pagamento_para',
    pattern=r'Pagamento\s{1,5}(?:de\s{1,5})?' + _C + _A + r'\s{1,5}(?:para|em)\s{1,5}' + REST,
    example='Pagamento de R$ 30,00 para Loja',
)


def _bank_rules(*specs: PatternSpec, confidence: float = 0.85) -> tuple[VendorRule, ...]:
    return tuple(VendorRule(spec=spec, confidence=confidence) for spec in specs)


# ========== Google Wallet ==========

_WITH_CARD = re.compile(r'\s{1,5}com\s{1,5}cart[ãa]o.{0,120}$', re.IGNORECASE)


def _wallet_rule(spec: PatternSpec) -> VendorRule:
    return VendorRule(
        spec=spec,
        confidence=0.9,
        merchant_strip=_WITH_CARD,
        require_merchant=True,
    )


GOOGLE_WALLET_RULES = (
    _wallet_rule(PatternSpec(
        name='wallet_bullet',
        pattern=_C + _A + r'\s{0,5}[•\-–]\s{0,5}(.{1,120}?)(?:\s{0,5}[•\-–]|$)',
        example='R$ 45,90 • Padaria Silva',
    )),
    _wallet_rule(PatternSpec(
        name='wallet_purchase_in',
        pattern=(
            r'(?:Compra|Pagamento)\s{1,5}(?:de\s{1,5})?' + _C + _A
            + r'\s{1,5}em\s{1,5}(.{1,120}?)(?:\s{1,5}com\s{1,5}cart[ãa]o|$)'
        ),
        example='Compra de R$ 45,90 em Padaria com cartão •••• 1234',
    )),
    _wallet_rule(PatternSpec(
        name='wallet_card_then_merchant',
        pattern=(
            _C + _A + r'\s{1,5}com\s{1,5}cart[ãa]o\s{1,5}[•*]{1,20}\s{0,5}[0-9]{1,19}'
            + r'\s{1,5}em\s{1,5}' + REST
        ),
        example='R$ 45,90 com cartão •••• 1234 em Padaria',
    )),
    _wallet_rule(PatternSpec(
        name='wallet_amount_then_name',
        pattern=_C + _A + r'\s{1,5}(.{1,120}?)(?:\s{1,5}[•*]|$)',
        example='R$ 45,90 Padaria',
    )),
)

# ========== Nubank ==========

NUBANK_RULES = (
    VendorRule(
        spec=PatternSpec(
            name='nubank_purchase_approved',
            pattern=(
                r'Compra\s{1,5}(?:aprovada|no\s{1,5}(?:d[ée]bito|cr[ée]dito))\s{1,5}de\s{1,5}'
                + _C + _A + r'\s{1,5}em\s{1,5}' + REST
            ),
            example='Compra aprovada de R$ 45,90 em MERCADO',
        ),
        confidence=0.95,
    ),
    VendorRule(
        spec=PatternSpec(
            name='nubank_purchase',
            pattern=r'Compra\s{1,5}de\s{1,5}' + _C + _A + r'\s{1,5}(?:aprovada\s{1,5})?em\s{1,5}' + REST,
            example='Compra de R$ 45,90 aprovada em MERCADO',
        ),
        confidence=0.95,
    ),
    VendorRule(
        spec=PatternSpec(
            name='nubank_amount_in',
            pattern=_C + _A + r'\s{1,5}em\s{1,5}' + REST,
            example='R$ 45,90 em MERCADO',
        ),
        confidence=0.95,
    ),
    VendorRule(
        spec=PatternSpec(
            name='nubank_pix_sent',
            pattern=r'Pix\s{1,5}enviado\s{1,5}(?:de\s{1,5})?' + _C + _A + r'\s{1,5}para\s{1,5}' + REST,
            example='Pix enviado de R$ 100,00 para Maria',
        ),
        confidence=0.95,
        transaction_type=TransactionType.PIX_SENT,
    ),
    VendorRule(
        spec=PatternSpec(
            name='nubank_pix_received',
            pattern=r'Pix\s{1,5}recebido\s{1,5}(?:de\s{1,5})?' + _C + _A + r'\s{1,5}de\s{1,5}' + REST,
            example='Pix recebido de R$ 50,00 de Maria',
        ),
        confidence=0.95,
        transaction_type=TransactionType.PIX_RECEIVED,
    ),
)

# ========== Itaú ==========
# Only Pix notifications; direction comes from the title, fields from the body.

ITAU_RULES = (
    VendorRule(
        spec=PatternSpec(
            name='itau_amount_then_cpf',
            pattern=_C + _A + r'.{0,80}?\b(?:de|para)\s{1,5}(.{1,80}?),\s{0,5}CPF',
            example='Pix de R$ 100,00 para João Silva, CPF ***.456.789-**',
        ),
        confidence=0.95,
    ),
    VendorRule(
        spec=PatternSpec(
            name='itau_cpf_then_amount',
            pattern=r'\b(?:de|para)\s{1,5}(.{1,80}?),\s{0,5}CPF.{0,120}?' + _C + _A,
            example='Você recebeu um Pix de João Silva, CPF ***.456.789-** de R$ 100,00',
        ),
        confidence=0.95,
        amount_group=2,
        merchant_group=1,
    ),
    VendorRule(
        spec=PatternSpec(
            name='itau_amount_then_name',
            pattern=_C + _A + r'\s{1,5}(?:de|para)\s{1,5}(.{1,80}?)\.?\s{0,5}$',
            example='Pix recebido de R$ 100,00 de João Silva',
        ),
        confidence=0.95,
    ),
    VendorRule(
        spec=PatternSpec(
            name='itau_amount_only',
            pattern=_C + _A,
            example='Pix de R$ 100,00 realizado',
        ),
        confidence=0.9,
        merchant_group=None,
    ),
)

ITAU_DIRECTION = TitleDirection(
    title="Pix recebido",
    on_match=TransactionType.PIX_RECEIVED,
    otherwise=TransactionType.PIX_SENT,
)

# ========== Other banks ==========

BRADESCO_RULES = _bank_rules(COMPRA_APROVADA_EM, AMOUNT_DASH)

BANCO_DO_BRASIL_RULES = _bank_rules(
    COMPRA_EM,
    PatternSpec(
        name='bb_debit',
        pattern=r'D[ée]bito\s{1,5}(?:de\s{1,5})?' + _C + _A + r'\s{1,5}(?:em|no)\s{1,5}' + REST,
        example='Débito de R$ 12,00 em PADARIA',
    ),
)

SANTANDER_RULES = _bank_rules(
    COMPRA_APROVADA_EM,
    PatternSpec(
        name='santander_amount_in',
        pattern=_C + _A + r'\s{1,5}(?:em|no)\s{1,5}' + REST,
        example='R$ 45,90 em MERCADO',
    ),
)

INTER_RULES = _bank_rules(
    COMPRA_EM,
    PatternSpec(
        name='inter_payment',
        pattern=r'Pagamento\s{1,5}(?:de\s{1,5})?' + _C + _A + r'\s{1,5}(?:em|para)\s{1,5}' + REST,
        example='Pagamento de R$ 80,00 para CONCESSIONARIA',
    ),
)

C6_BANK_RULES = _bank_rules(COMPRA_APROVADA_EM, AMOUNT_DASH)

PICPAY_RULES = _bank_rules(
    PAGAMENTO_PARA,
    PatternSpec(
        name='picpay_you_paid',
        pattern=r'Voc[êe]\s{1,5}pagou\s{1,5}' + _C + _A + r'\s{1,5}(?:para|em)\s{1,5}' + REST,
        example='Você pagou R$ 15,00 para Maria',
    ),
)

MERCADO_PAGO_RULES = _bank_rules(PAGAMENTO_PARA, COMPRA_EM)


VENDOR_PROFILES: Mapping[Vendor, VendorProfile] = MappingProxyType({
    Vendor.GOOGLE_WALLET: VendorProfile(rules=GOOGLE_WALLET_RULES, extract_card=True),
    Vendor.NUBANK: VendorProfile(rules=NUBANK_RULES),
    Vendor.ITAU: VendorProfile(rules=ITAU_RULES, source=TextSource.BODY, direction=ITAU_DIRECTION),
    Vendor.BRADESCO: VendorProfile(rules=BRADESCO_RULES, extract_card=True),
    Vendor.BANCO_DO_BRASIL: VendorProfile(rules=BANCO_DO_BRASIL_RULES, extract_card=True),
    Vendor.SANTANDER: VendorProfile(rules=SANTANDER_RULES, extract_card=True),
    Vendor.INTER: VendorProfile(rules=INTER_RULES, extract_card=True),
    Vendor.C6_BANK: VendorProfile(rules=C6_BANK_RULES, extract_card=True),
    Vendor.PICPAY: VendorProfile(rules=PICPAY_RULES),
    Vendor.MERCADO_PAGO: VendorProfile(rules=MERCADO_PAGO_RULES, extract_card=True),
    Vendor.GENERIC: VendorProfile(),
})
