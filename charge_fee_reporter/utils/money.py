"""Minor-unit currency formatting"""


def format_cents(amount: int, symbol: str = "$") -> str:
    """
    Format an integer minor-unit amount as a 2dp decimal string.

    Uses integer division so large amounts stay exact (no float rounding).

    Example:
        941 → "$9.41"
        -59 → "$-0.59"
    """
    sign = "-" if amount < 0 else ""
    units, cents = divmod(abs(amount), 100)
    return f"{symbol}{sign}{units}.{cents:02d}"
