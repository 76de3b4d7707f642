"""Equipment repository."""

from dealerdesk.core.database.tenant import TenantScopedRepository
from dealerdesk.modules.equipment.models import Equipment


class EquipmentRepository(TenantScopedRepository[Equipment]):
    model = Equipment
