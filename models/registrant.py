from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from config.defaults import LEADER_CAPABLE, REGION_DOMESTIC, ROLE_HEALER


@dataclass(frozen=True)
class Registrant:
    id: str
    role: str                 # "melee", "ranged", "healer"
    leadership: str           # "willing", "unwilling", "semi-willing"
    proficiency: str          # "novice" < "familiar" < "very-familiar" < "expert"
    region: str               # "domestic", "north-america", "other"
    time_slot: str
    created_at: Optional[datetime] = None

    @property
    def is_healer(self) -> bool:
        return self.role == ROLE_HEALER

    @property
    def can_lead(self) -> bool:
        return self.leadership in LEADER_CAPABLE

    @property
    def is_domestic(self) -> bool:
        return self.region == REGION_DOMESTIC
