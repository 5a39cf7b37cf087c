"""Rewriting engine.

Edit buffer, comment-aware text locator, guard matcher, else-chain
normalizer and the Go fragments they emit.

Python 3.13+.
"""

from .buffer import Edit, EditBuffer
from .locator import NOT_FOUND, TextLocator
from .matcher import GuardInjector, InjectionSite, is_guard
from .normalizer import ElseChainNormalizer
from .templates import InjectionTemplate, import_block, reference_declarations

__all__ = [
    "NOT_FOUND",
    "Edit",
    "EditBuffer",
    "ElseChainNormalizer",
    "GuardInjector",
    "InjectionSite",
    "InjectionTemplate",
    "TextLocator",
    "import_block",
    "is_guard",
    "reference_declarations",
]
