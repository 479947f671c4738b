"""Configuration classes for dinicflow components."""

from dataclasses import dataclass


@dataclass
class MaxFlowConfig:
    """Defaults for max-flow computation and graph conversion."""

    # Work on a copy of the network instead of mutating it in place
    copy_graph: bool = False

    # Edge attribute read by the NetworkX adapters
    capacity_attr: str = "capacity"

    # Capacity used when an imported edge has no capacity attribute
    default_capacity: int = 1

    # Emit a DEBUG line every N phases; 0 disables per-phase lines
    phase_log_interval: int = 1

    def should_log_phase(self, phase: int) -> bool:
        """Return True if progress for the given 1-based phase should be logged."""
        if self.phase_log_interval <= 0:
            return False
        return phase % self.phase_log_interval == 0


# Global configuration instance
FLOW_CONFIG = MaxFlowConfig()
