"""Generates human-readable descriptions of allocation results."""

from collections import Counter
from typing import List, Optional, Sequence

from models.registrant import Registrant
from models.allocation import AllocationResult, AllocationWarning, SlotAllocation
from config.defaults import PROFICIENCY_ORDER, WARNING_INSUFFICIENT_DOMESTIC, MIN_DOMESTIC_PER_TEAM

WARNING_MESSAGES = {
    WARNING_INSUFFICIENT_DOMESTIC: "fewer than {min_domestic} domestic-region members",
}


def team_label(slot: SlotAllocation, team_index: int) -> str:
    if team_index == slot.standby_index:
        return "Standby"
    return f"Team {team_index + 1}"


def find_leader(team: Sequence[Registrant]) -> Optional[Registrant]:
    """First member willing (or semi-willing) to lead, if any."""
    return next((m for m in team if m.can_lead), None)


def explain_warning(slot: SlotAllocation, warning: AllocationWarning) -> str:
    template = WARNING_MESSAGES.get(warning.reason, warning.reason)
    reason = template.format(min_domestic=MIN_DOMESTIC_PER_TEAM)
    return f"{warning.time_slot} / {team_label(slot, warning.team_index)}: {reason}"


def describe_team(team: Sequence[Registrant]) -> List[str]:
    """Produce composition lines for a team: size, healers, leader, region, proficiency mix."""
    lines = []
    healers = sum(1 for m in team if m.is_healer)
    domestic = sum(1 for m in team if m.is_domestic)
    leader = find_leader(team)

    lines.append(f"{len(team)} members, {healers} healer(s)")
    if leader:
        lines.append(f"Leader: {leader.id} ({leader.leadership})")
    else:
        lines.append("Leader: none volunteered")
    lines.append(f"Domestic region: {domestic}")

    tiers = Counter(m.proficiency for m in team)
    ordered = [t for t in PROFICIENCY_ORDER if tiers.get(t)]
    ordered += sorted(t for t in tiers if t not in PROFICIENCY_ORDER)
    if ordered:
        lines.append("Proficiency: " + ", ".join(f"{t} x{tiers[t]}" for t in ordered))
    return lines


def summarize_result(result: AllocationResult) -> dict:
    """Headline totals for the results view."""
    return {
        "registrants": result.total_registrants,
        "slots": len(result.slots),
        "teams": sum(len(s.teams) for s in result.slots),
        "standby": sum(len(s.standby) for s in result.slots),
        "warnings": len(result.all_warnings),
    }
