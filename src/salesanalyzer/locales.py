"""
Locale tables for column names, receipt types and month names.
"""

from collections.abc import Iterable

from .models import Language, ReceiptKind

# Column aliases per logical field, in lookup priority order.
COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "receipt_type": ("Receipt Type", "Tipo de Recibo"),
    "profit": ("Profit", "Ganancia"),
    "date_created": ("Date Created", "Fecha de creación"),
    "customer_name": ("Customer Name", "Nombre del Cliente"),
}

RECEIPT_KINDS: dict[str, ReceiptKind] = {
    "Retail Sale": ReceiptKind.RETAIL,
    "Venta al menudeo": ReceiptKind.RETAIL,
    "Club Visit/Sale": ReceiptKind.CLUB,
    "Visita al Club / Venta": ReceiptKind.CLUB,
}

# Rows for this customer never count towards anything.
EXCLUDED_CUSTOMER = "ashley regis"

MONTH_NAMES: dict[Language, tuple[str, ...]] = {
    Language.EN: (
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ),
    Language.ES: (
        "Enero",
        "Febrero",
        "Marzo",
        "Abril",
        "Mayo",
        "Junio",
        "Julio",
        "Agosto",
        "Septiembre",
        "Octubre",
        "Noviembre",
        "Diciembre",
    ),
}


def month_name(month: int, language: Language = Language.EN) -> str:
    """Return the localized name for a month number (1-12)."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    return MONTH_NAMES[language][month - 1]


def month_from_name(name: str) -> int | None:
    """Look up a month number by its name in any supported language."""
    needle = name.strip().lower()
    for names in MONTH_NAMES.values():
        for index, candidate in enumerate(names, start=1):
            if candidate.lower() == needle:
                return index
    return None


def month_labels(
    months: Iterable[int],
    language: Language = Language.EN,
) -> list[str]:
    """Render month numbers as names in the given language."""
    return [month_name(month, language) for month in months]
