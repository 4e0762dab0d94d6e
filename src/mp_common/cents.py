"""Integer arithmetic utilities for cents-based balances.

All prices, amounts, and balances use int (cents). No float, no Decimal.
"""


def cents_to_display(cents: int) -> str:
    """Convert cents to display string: 6500 -> '$65.00', -1200 -> '-$12.00'."""
    if cents < 0:
        abs_cents = -cents
        return f"-${abs_cents // 100:,}.{abs_cents % 100:02d}"
    return f"${cents // 100:,}.{cents % 100:02d}"


def exceeds_percent_of(amount: int, total: int, percent: int) -> bool:
    """True when amount > total * percent / 100, compared without division.

    amount * 100 > total * percent
    """
    return amount * 100 > total * percent
