"""
Domain Entities: Summaries
Results returned by the upload and balance use cases
"""

from dataclasses import dataclass, asdict


@dataclass
class UploadSummary:
    """Outcome of a CSV upload; status counts reflect the whole store"""

    message: str
    total_records: int
    success_records: int
    failed_records: int
    pending_records: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class BalanceSummary:
    """Balance over successful transactions, in minor units"""

    balance: int
    credits: int
    debits: int

    @classmethod
    def from_totals(cls, balance: int, credits: int) -> "BalanceSummary":
        return cls(balance=balance, credits=credits, debits=credits - balance)

    def to_dict(self) -> dict:
        return asdict(self)
