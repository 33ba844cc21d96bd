from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Money:
    """Amount paired with its ISO currency code."""
    amount: Decimal
    currency: str

    def __post_init__(self):
        object.__setattr__(self, 'amount', Decimal(str(self.amount)))
        object.__setattr__(self, 'currency', self.currency.upper())

    def __str__(self):
        return f"{self.amount:.2f} {self.currency}"
