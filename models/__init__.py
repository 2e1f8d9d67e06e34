from models.registrant import Registrant
from models.allocation import AllocationWarning, SlotAllocation, AllocationResult
from models.audit import AuditEntry
