"""Service ticket repository."""

from dealerdesk.core.database.tenant import TenantScopedRepository
from dealerdesk.modules.service_tickets.models import ServiceTicket


class ServiceTicketRepository(TenantScopedRepository[ServiceTicket]):
    model = ServiceTicket
