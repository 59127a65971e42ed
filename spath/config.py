"""Configuration classes for spath components."""

from dataclasses import dataclass


@dataclass
class SolverConfig:
    """Configuration shared by the shortest-path engines."""

    # Scan every edge for weights below the monoid identity before running
    # Dijkstra, bidirectional Dijkstra or A*.
    check_non_negative_weights: bool = False

    # Floyd-Warshall path reconstruction performs at most
    # factor * order split steps per vertex pair.
    max_reconstruction_steps_factor: int = 4

    def reconstruction_budget(self, order: int) -> int:
        """Return the split-step budget for one Floyd-Warshall reconstruction."""
        return max(1, self.max_reconstruction_steps_factor * max(order, 1))


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
