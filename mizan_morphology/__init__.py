"""
Mizan Arabic Morphology Engine

Derived word generation and validation from triliteral roots:
- Root type classification (regular, mithal, ajwaf, naqis, lafif)
- AVL tree of roots with derivative frequency tracking
- Chained hash table of scheme templates
- Ordered rewrite rules for weak roots and root-specific exceptions

Usage:
    from mizan_morphology import MorphologyEngine

    engine = MorphologyEngine.with_defaults()
    engine.generate('كتب', 'فاعل')      # كاتب
    engine.generate('رمي', 'فاعل')      # رامٍ
    engine.validate('كتب', 'مكتوب')     # ValidationResult(valid=True, root='كتب', scheme='مفعول')
"""

from .config import Config, config
from .engine import MorphologyEngine, ValidationResult
from .errors import (
    MorphologyError, InvalidRoot, RootNotFound, SchemeNotFound, PersistenceError
)
from .generator import EngineState
from .pattern_store import PatternStore
from .persistence import DefinitionFiles
from .root_store import RootStore, RootNode, Derivative
from .root_types import RootType, classify_root, canonical_letters, normalize_root
from .statistics import MorphologyStatistics
from .transformations import (
    TransformationRule, TransformationGroup, TransformationRegistry,
    parse_transformations, serialize_transformations
)

__version__ = "1.0.0"
__all__ = [
    'Config',
    'config',
    'MorphologyEngine',
    'ValidationResult',
    'EngineState',
    'MorphologyError',
    'InvalidRoot',
    'RootNotFound',
    'SchemeNotFound',
    'PersistenceError',
    'PatternStore',
    'RootStore',
    'RootNode',
    'Derivative',
    'RootType',
    'classify_root',
    'canonical_letters',
    'normalize_root',
    'DefinitionFiles',
    'MorphologyStatistics',
    'TransformationRule',
    'TransformationGroup',
    'TransformationRegistry',
    'parse_transformations',
    'serialize_transformations',
]
