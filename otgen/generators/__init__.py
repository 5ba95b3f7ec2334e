"""Combinatorial generators for the exhaustive search space.

Barrel export for the element, underlying form, lexical entry and
competition generators and the typology builder.
"""

from .element import ElementGenerator
from .underlying import UnderlyingFormGenerator
from .lexical import LexicalEntryGenerator
from .competition import CompetitionGenerator
from .typology import TypologyBuilder

__all__ = [
    "ElementGenerator",
    "UnderlyingFormGenerator",
    "LexicalEntryGenerator",
    "CompetitionGenerator",
    "TypologyBuilder",
]
