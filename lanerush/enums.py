from enum import Enum

class Phase(str, Enum):
    READY   = "READY"
    RUNNING = "RUNNING"
    ENDED   = "ENDED"

class BurstKind(str, Enum):
    LANE_CHANGE = "LANE_CHANGE"
    PASS        = "PASS"
