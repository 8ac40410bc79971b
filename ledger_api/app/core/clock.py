"""Clock used to stamp ledger entries."""

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]

LEDGER_DATE_FORMAT = "%d/%m"


def local_now() -> datetime:
    return datetime.now()


def ledger_date(clock: Clock) -> str:
    """Render the clock's current local date as ``DD/MM`` (no year)."""
    return clock().strftime(LEDGER_DATE_FORMAT)
