"""AI layer: pathfinding, perception, and the orchestrator boundary."""

from tactics.ai.orchestrator import Orchestrator, RuleOrchestrator
from tactics.ai.pathfinding import Pathfinder
from tactics.ai.perception import Perception

__all__ = ["Orchestrator", "Pathfinder", "Perception", "RuleOrchestrator"]
