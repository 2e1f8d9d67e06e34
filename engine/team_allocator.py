"""Team allocation logic: partitions each time slot's registrants into teams."""

import logging
import random
from collections import deque
from typing import Dict, Iterable, List, Optional, Sequence

from models.registrant import Registrant
from models.allocation import AllocationResult, AllocationWarning, SlotAllocation
from config.defaults import (
    TIME_SLOTS, TEAM_SIZE, MIN_HEALERS_PER_TEAM, MIN_DOMESTIC_PER_TEAM,
    PROFICIENCY_ORDER, WARNING_INSUFFICIENT_DOMESTIC,
    LEADERSHIP_WILLING, LEADERSHIP_SEMI,
)

logger = logging.getLogger(__name__)


def partition_by_slot(
    registrants: Iterable[Registrant],
    time_slots: Sequence[str] = TIME_SLOTS,
) -> Dict[str, List[Registrant]]:
    """Group registrants by time slot.

    Configured slots come first in configured order (possibly empty); any
    unrecognized slot value gets its own bucket in first-appearance order.
    """
    pools: Dict[str, List[Registrant]] = {slot: [] for slot in time_slots}
    for r in registrants:
        pools.setdefault(r.time_slot, []).append(r)
    return pools


def _shuffled(items: Sequence, rng: random.Random) -> list:
    out = list(items)
    rng.shuffle(out)
    return out


def _tier_sequence(members: Sequence[Registrant]) -> List[str]:
    """Known proficiency tiers in ascending order, then unknown tiers as first seen."""
    tiers = list(PROFICIENCY_ORDER)
    for m in members:
        if m.proficiency not in tiers:
            tiers.append(m.proficiency)
    return tiers


def _stratified_order(
    members: Sequence[Registrant],
    positions: Sequence[int],
    rng: random.Random,
) -> deque:
    """Interleave proficiency tiers round-robin, each tier shuffled independently."""
    groups: Dict[str, deque] = {tier: deque() for tier in _tier_sequence(members)}
    for pos in positions:
        groups[members[pos].proficiency].append(pos)
    for tier in groups:
        groups[tier] = deque(_shuffled(groups[tier], rng))

    combined = deque()
    while any(groups.values()):
        for tier, group in groups.items():
            if group:
                combined.append(group.popleft())
    return combined


def assign_pool(
    pool: Sequence[Registrant],
    time_slot: str,
    rng: Optional[random.Random] = None,
    rule_config: Optional[dict] = None,
) -> SlotAllocation:
    """Partition one time slot's pool into full teams, a standby group and warnings."""
    cfg = rule_config or {}
    team_size = cfg.get("team_size", TEAM_SIZE)
    healer_target = cfg.get("min_healers_per_team", MIN_HEALERS_PER_TEAM)
    min_domestic = cfg.get("min_domestic_per_team", MIN_DOMESTIC_PER_TEAM)
    rng = rng or random.Random()

    members = list(pool)

    # Step 1: Team count
    num_full = len(members) // team_size
    if num_full == 0:
        return SlotAllocation(time_slot=time_slot, teams=(), standby=tuple(members))

    standby = num_full
    slots: List[List[int]] = [[] for _ in range(num_full + 1)]
    placed = set()

    def place(pos: int, slot_index: int):
        slots[slot_index].append(pos)
        placed.add(pos)

    def healer_count(slot_index: int) -> int:
        return sum(1 for p in slots[slot_index] if members[p].is_healer)

    # Step 2: Healers, one per slot, then second healers for full teams
    healers = deque(_shuffled([i for i, m in enumerate(members) if m.is_healer], rng))
    for i in range(num_full + 1):
        if not healers:
            break
        place(healers.popleft(), i)

    needing_second = deque(_shuffled(
        [i for i in range(num_full) if healer_count(i) < healer_target], rng
    ))
    while healers:
        h = healers.popleft()
        if healer_count(standby) < healer_target:
            place(h, standby)
        elif needing_second:
            place(h, needing_second.popleft())
        else:
            place(h, standby)

    # Step 3: Leaders, willing > semi-willing > highest proficiency
    willing = deque(_shuffled(
        [i for i, m in enumerate(members) if i not in placed and m.leadership == LEADERSHIP_WILLING], rng
    ))
    semi = deque(_shuffled(
        [i for i, m in enumerate(members) if i not in placed and m.leadership == LEADERSHIP_SEMI], rng
    ))
    for i in range(num_full):
        if any(members[p].can_lead for p in slots[i]):
            continue
        if willing:
            place(willing.popleft(), i)
        elif semi:
            place(semi.popleft(), i)
        else:
            for tier in reversed(PROFICIENCY_ORDER):
                candidate = next(
                    (p for p, m in enumerate(members) if p not in placed and m.proficiency == tier),
                    None,
                )
                if candidate is not None:
                    place(candidate, i)
                    break
    for pos in list(willing) + list(semi):
        place(pos, standby)

    # Step 4: Fill the rest, interleaving proficiency tiers
    remaining = _stratified_order(
        members, [i for i in range(len(members)) if i not in placed], rng
    )
    for i in range(num_full):
        while len(slots[i]) < team_size and remaining:
            place(remaining.popleft(), i)
    while remaining:
        place(remaining.popleft(), standby)

    # Overflow healers/leaders can leave full teams short; pull them back from standby
    for i in range(num_full):
        while len(slots[i]) < team_size and slots[standby]:
            slots[i].append(_take_from_standby(slots[standby], members))

    # Step 5: Region warnings
    warnings = []
    for i in range(num_full + 1):
        if i == standby and not slots[i]:
            continue
        domestic = sum(1 for p in slots[i] if members[p].is_domestic)
        if domestic < min_domestic:
            warnings.append(AllocationWarning(time_slot, i, WARNING_INSUFFICIENT_DOMESTIC))

    logger.debug(
        "Slot %r: %d registrants -> %d teams, %d standby, %d warnings",
        time_slot, len(members), num_full, len(slots[standby]), len(warnings),
    )
    return SlotAllocation(
        time_slot=time_slot,
        teams=tuple(tuple(members[p] for p in slots[i]) for i in range(num_full)),
        standby=tuple(members[p] for p in slots[standby]),
        warnings=tuple(warnings),
    )


def _take_from_standby(standby_slot: List[int], members: Sequence[Registrant]) -> int:
    """Remove a standby member for a short team, keeping standby's healers longest."""
    for idx in range(len(standby_slot) - 1, -1, -1):
        if not members[standby_slot[idx]].is_healer:
            return standby_slot.pop(idx)
    return standby_slot.pop()


def assign(
    registrants: Iterable[Registrant],
    time_slots: Sequence[str] = TIME_SLOTS,
    rng: Optional[random.Random] = None,
    rule_config: Optional[dict] = None,
) -> AllocationResult:
    """Full allocation pipeline: group by time slot, then allocate each pool."""
    rng = rng or random.Random()
    pools = partition_by_slot(registrants, time_slots)

    results = []
    for time_slot, pool in pools.items():
        allocation = assign_pool(pool, time_slot, rng, rule_config)
        if not allocation.is_empty:
            results.append(allocation)

    result = AllocationResult(slots=tuple(results))
    logger.info(
        "Allocated %d registrants across %d slots (%d warnings)",
        result.total_registrants, len(result.slots), len(result.all_warnings),
    )
    return result
