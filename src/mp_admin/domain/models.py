"""Domain models for mp_admin — aggregated payment rows."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContractorPayment:
    contractor_id: int
    total_paid: int   # cents


@dataclass(frozen=True)
class ClientPayment:
    client_id: int
    total_paid: int   # cents


@dataclass(frozen=True)
class BestClient:
    client_id: int
    total_paid: int   # cents
    full_name: str
