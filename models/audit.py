from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class AuditEntry:
    timestamp: datetime
    action: str              # "register", "delete", "clear", "override", "import", "assign"
    registrant_id: Optional[str]
    old_value: str
    new_value: str
    rationale: str = ""
