import os
from decimal import Decimal
from typing import Optional, Union

from babel.numbers import format_currency

LOCALE = os.getenv("STOREFRONT_LOCALE", "en_US")
CURRENCY = os.getenv("STOREFRONT_CURRENCY", "USD")


def format_price(
    value: Union[int, float, Decimal],
    locale: Optional[str] = None,
    currency: Optional[str] = None,
) -> str:
    """
    Formats a product price in cents to a currency string.

    Example:
        format_price(1000)  # $10.00
        format_price(1550)  # $15.50
        format_price(2033.333333)  # $20.33
    """
    amount = Decimal(str(value)) / 100
    return format_currency(amount, currency or CURRENCY, locale=locale or LOCALE)
