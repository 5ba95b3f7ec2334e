"""Service layer implementations.

Barrel export for GEN, input building and the linguistic systems.
"""

from .gen import gen, output_assignments, AUTOMATA, BucketAutomaton
from .input_builder import InputBuilder
from .system import System, SystemFactory

__all__ = [
    "gen",
    "output_assignments",
    "AUTOMATA",
    "BucketAutomaton",
    "InputBuilder",
    "System",
    "SystemFactory",
]
