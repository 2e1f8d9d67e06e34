from dataclasses import dataclass
from typing import List, Optional, Tuple

from models.registrant import Registrant

Team = Tuple[Registrant, ...]


@dataclass(frozen=True)
class AllocationWarning:
    time_slot: str
    team_index: int     # == number of full teams for the standby group
    reason: str         # "insufficient_domestic"


@dataclass(frozen=True)
class SlotAllocation:
    time_slot: str
    teams: Tuple[Team, ...]
    standby: Team
    warnings: Tuple[AllocationWarning, ...] = ()

    @property
    def standby_index(self) -> int:
        return len(self.teams)

    @property
    def size(self) -> int:
        return sum(len(t) for t in self.teams) + len(self.standby)

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    def members(self, team_index: int) -> Team:
        """Members of a full team, or the standby for ``standby_index``."""
        if team_index == self.standby_index:
            return self.standby
        return self.teams[team_index]


@dataclass(frozen=True)
class AllocationResult:
    slots: Tuple[SlotAllocation, ...] = ()

    @property
    def all_warnings(self) -> List[AllocationWarning]:
        return [w for s in self.slots for w in s.warnings]

    @property
    def total_registrants(self) -> int:
        return sum(s.size for s in self.slots)

    def slot(self, time_slot: str) -> Optional[SlotAllocation]:
        for s in self.slots:
            if s.time_slot == time_slot:
                return s
        return None

    def has_warning(self, time_slot: str, team_index: int) -> bool:
        return any(
            w.time_slot == time_slot and w.team_index == team_index
            for w in self.all_warnings
        )
