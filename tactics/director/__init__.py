"""Director layer: budgeted world edits and phased boss encounters."""

from tactics.director.boss import BossDirector
from tactics.director.ops import apply_director_plan
from tactics.director.phase import PhaseDirector, PhasePlan, PhaseSpec, PhaseState, load_phases
from tactics.director.schema import Collapse, DirectorBudget, DirectorPlan, Fortify, SpawnWave

__all__ = [
    "BossDirector",
    "Collapse",
    "DirectorBudget",
    "DirectorPlan",
    "Fortify",
    "PhaseDirector",
    "PhasePlan",
    "PhaseSpec",
    "PhaseState",
    "SpawnWave",
    "apply_director_plan",
    "load_phases",
]
