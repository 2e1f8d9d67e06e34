"""Default configuration constants for the Raid Team Planner."""

import os

# Time slots offered on the registration form (display order)
TIME_SLOTS = [
    "Sun 9:30pm EST / 6:30pm PST (Mon 10:30am CN)",
    "Mon 6:30pm CN",
]

# Team shape
TEAM_SIZE = 10
MIN_HEALERS_PER_TEAM = 2      # Second-pass healer target for full teams and standby
MIN_DOMESTIC_PER_TEAM = 2     # Below this a team gets a region warning

# Roles
ROLE_MELEE = "melee"
ROLE_RANGED = "ranged"
ROLE_HEALER = "healer"
ROLES = [ROLE_MELEE, ROLE_RANGED, ROLE_HEALER]

# Leadership willingness
LEADERSHIP_WILLING = "willing"
LEADERSHIP_UNWILLING = "unwilling"
LEADERSHIP_SEMI = "semi-willing"
LEADERSHIP_OPTIONS = [LEADERSHIP_WILLING, LEADERSHIP_UNWILLING, LEADERSHIP_SEMI]
LEADER_CAPABLE = {LEADERSHIP_WILLING, LEADERSHIP_SEMI}

# Proficiency tiers, ascending
PROFICIENCY_ORDER = ["novice", "familiar", "very-familiar", "expert"]

# Regions
REGION_DOMESTIC = "domestic"
REGION_NORTH_AMERICA = "north-america"
REGION_OTHER = "other"
REGIONS = [REGION_NORTH_AMERICA, REGION_DOMESTIC, REGION_OTHER]

# Warning reason codes
WARNING_INSUFFICIENT_DOMESTIC = "insufficient_domestic"

# Registration window: Friday 12:00 to Sunday 12:00, fixed UTC-8
WINDOW_UTC_OFFSET_HOURS = -8
WINDOW_OPEN_WEEKDAY = 4       # Friday (datetime.weekday)
WINDOW_CLOSE_WEEKDAY = 6      # Sunday
WINDOW_BOUNDARY_HOUR = 12

# Admin override values
OVERRIDE_OPEN = "open"
OVERRIDE_CLOSED = "closed"

# Admin gate
ADMIN_PASSWORD = os.environ.get("RAID_PLANNER_ADMIN_PASSWORD", "admin888")

# Logging
LOG_LEVEL = os.environ.get("RAID_PLANNER_LOG_LEVEL", "INFO")

# Registration form defaults
DEFAULT_FORM = {
    "id": "",
    "role": ROLE_MELEE,
    "leadership": LEADERSHIP_UNWILLING,
    "proficiency": "familiar",
    "region": REGION_NORTH_AMERICA,
    "time_slot": TIME_SLOTS[0],
}

# Display decorations
ROLE_COLORS = {ROLE_MELEE: "#f97316", ROLE_RANGED: "#3b82f6", ROLE_HEALER: "#22c55e"}
PROFICIENCY_EMOJI = {"novice": "🌱", "familiar": "⚔️", "very-familiar": "🔥", "expert": "👑"}
