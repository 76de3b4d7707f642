"""Business record status lifecycle.

Leads and customers share one status table. ``active`` is the hinge
between the two: a lead that reaches ``active`` has become a customer.
"""

from types import MappingProxyType
from typing import Literal


RecordType = Literal["lead", "customer"]

LEAD: RecordType = "lead"
CUSTOMER: RecordType = "customer"

LEAD_STATUSES: frozenset[str] = frozenset(
    {"new", "contacted", "qualified", "proposal_sent", "negotiating", "lost"}
)
CUSTOMER_STATUSES: frozenset[str] = frozenset(
    {"active", "inactive", "churned", "expired", "competitor_switch", "non_payment"}
)

# Customers in these statuses are listed as former customers
FORMER_CUSTOMER_STATUSES: frozenset[str] = frozenset(
    {"inactive", "churned", "expired", "competitor_switch"}
)

STATUS_TRANSITIONS: MappingProxyType[str, frozenset[str]] = MappingProxyType(
    {
        # Leads
        "new": frozenset({"contacted", "lost"}),
        "contacted": frozenset({"qualified", "lost"}),
        "qualified": frozenset({"proposal_sent", "lost"}),
        "proposal_sent": frozenset({"negotiating", "active", "lost"}),
        "negotiating": frozenset({"active", "lost"}),
        "lost": frozenset(),
        # Customers
        "active": frozenset({"inactive", "churned", "expired"}),
        "inactive": frozenset({"active", "churned"}),
        "churned": frozenset({"active"}),
        "expired": frozenset({"active"}),
        "competitor_switch": frozenset(),
        "non_payment": frozenset({"active", "churned"}),
    }
)


def allowed_transitions(status: str) -> frozenset[str]:
    """Statuses reachable from ``status``. Unknown statuses reach nothing."""
    return STATUS_TRANSITIONS.get(status, frozenset())


def can_transition(current: str, target: str) -> bool:
    """Check whether a record may move from ``current`` to ``target``.

    Staying in the same status is always allowed.
    """
    return current == target or target in allowed_transitions(current)


def statuses_for(record_type: str) -> frozenset[str]:
    return CUSTOMER_STATUSES if record_type == CUSTOMER else LEAD_STATUSES


def default_status(record_type: str) -> str:
    return "active" if record_type == CUSTOMER else "new"
