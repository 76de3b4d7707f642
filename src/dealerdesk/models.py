"""All mapped models, imported so ``Base.metadata`` knows every table.

Used by Alembic, the CLI and the test suite.
"""

from dealerdesk.core.database.base import Base
from dealerdesk.modules.business_records.models import BusinessRecord, BusinessRecordActivity
from dealerdesk.modules.equipment.models import Equipment
from dealerdesk.modules.service_tickets.models import ServiceTicket
from dealerdesk.modules.tenants.models import Tenant
from dealerdesk.modules.users.models import User


__all__ = [
    "Base",
    "BusinessRecord",
    "BusinessRecordActivity",
    "Equipment",
    "ServiceTicket",
    "Tenant",
    "User",
]
