"""
Morphology Engine

Generation, validation and administration of roots, schemes and
transformation groups. One engine owns one EngineState for the lifetime of
the process.

The engine is not thread-safe: generate, generate_all and validate all
update derivative counts, so a multi-request caller must serialize every
call.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, Iterable, List, Optional, Set, Union

from .config import Config
from .data import default_root_lines, default_scheme_lines, default_transformation_lines
from .definitions import parse_roots, parse_schemes, serialize_schemes
from .errors import PersistenceError, RootNotFound, SchemeNotFound
from .generator import EngineState, build_word
from .pattern_store import PatternStore
from .persistence import DefinitionFiles
from .root_types import normalize_root
from .statistics import MorphologyStatistics, compute_statistics
from .transformations import TransformationGroup, parse_transformations

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Outcome of validating a word against a root."""
    valid: bool
    root: Optional[str] = None
    scheme: Optional[str] = None

    def to_dict(self) -> Dict:
        return asdict(self)


class MorphologyEngine:
    """
    Main interface for generating and validating derived words.

    Usage:
        engine = MorphologyEngine.with_defaults()

        engine.generate('كتب', 'فاعل')        # 'كاتب'
        engine.generate_all('قول')            # ['قائل', 'مقول', ...]
        engine.validate('كتب', 'مكتوب')       # ValidationResult(True, 'كتب', 'مفعول')
        engine.get_derivatives('كتب')         # {'كاتب (f=1)', 'مكتوب (f=2)', ...}
    """

    def __init__(self, state: Optional[EngineState] = None, persistence=None):
        """
        Args:
            state: The stores to operate on (fresh empty stores if None)
            persistence: Object with write_schemes(lines) and
                write_transformations(lines); None keeps changes in memory
        """
        self.state = state if state is not None else EngineState()
        self.persistence = persistence

    @classmethod
    def with_defaults(cls) -> 'MorphologyEngine':
        """Engine loaded with the built-in definitions, no persistence."""
        return cls.from_config(Config(data_dir=None))

    @classmethod
    def from_config(cls, cfg: Config) -> 'MorphologyEngine':
        """Build the engine from the configured data directory or built-in data."""
        state = EngineState(patterns=PatternStore(cfg.initial_capacity, cfg.load_factor))

        if cfg.data_dir is None:
            engine = cls(state)
            engine.load_roots(default_root_lines())
            engine.load_schemes(default_scheme_lines())
            engine.load_transformations(default_transformation_lines())
            return engine

        files = DefinitionFiles.from_config(cfg)
        engine = cls(state, persistence=files)

        sources = [
            (files.roots_path, files.read_roots, default_root_lines, engine.load_roots),
            (files.schemes_path, files.read_schemes, default_scheme_lines, engine.load_schemes),
            (files.transformations_path, files.read_transformations,
             default_transformation_lines, engine.load_transformations),
        ]
        for path, read, defaults, load in sources:
            if cfg.seed_missing and not path.exists():
                logger.info(f"{path} missing, using built-in definitions")
                load(defaults())
            else:
                load(read())

        return engine

    # =========================================================================
    # LOADING
    # =========================================================================

    def load_roots(self, lines: Iterable[str]) -> int:
        """Insert roots from definition lines; returns how many roots were parsed."""
        roots = parse_roots(lines)
        for root in roots:
            self.state.roots.insert(root)
        logger.info(f"Loaded {len(roots)} roots ({len(self.state.roots)} in tree)")
        return len(roots)

    def load_schemes(self, lines: Iterable[str]) -> int:
        schemes = parse_schemes(lines)
        for name, template in schemes:
            self.state.patterns.put(name, template)
        logger.info(f"Loaded {len(schemes)} schemes")
        return len(schemes)

    def load_transformations(self, lines: Iterable[str]) -> int:
        """Replace all transformation groups with those parsed from lines."""
        groups = parse_transformations(lines)
        self.state.transformations.replace_all(groups)
        logger.info(f"Loaded {len(groups)} transformation groups")
        return len(groups)

    # =========================================================================
    # GENERATION AND VALIDATION
    # =========================================================================

    def generate(self, root: str, scheme: str) -> str:
        """
        Generate the word for a root and scheme and record it as a derivative.

        Raises:
            RootNotFound: root is not loaded
            SchemeNotFound: scheme is not loaded
        """
        root = normalize_root(root)
        node = self.state.roots.find(root)
        if node is None:
            raise RootNotFound(root)
        template = self.state.patterns.get(scheme)
        if template is None:
            raise SchemeNotFound(scheme)

        word = build_word(self.state, root, scheme, template)
        node.record_derivative(word)
        return word

    def generate_all(self, root: str) -> List[str]:
        """
        One word per scheme, in pattern store order (not sorted).
        Unknown roots give an empty list.
        """
        root = normalize_root(root)
        node = self.state.roots.find(root)
        if node is None:
            return []

        words = []
        for scheme, template in self.state.patterns.all():
            word = build_word(self.state, root, scheme, template)
            node.record_derivative(word)
            words.append(word)
        return words

    def validate(self, root: str, word: str) -> ValidationResult:
        """
        Check whether some scheme produces word from root.

        The first matching scheme in pattern store order wins, and the word
        is recorded as a derivative of the root.
        """
        root = normalize_root(root)
        node = self.state.roots.find(root)
        if node is None:
            return ValidationResult(False, None, None)

        for scheme, template in self.state.patterns.all():
            if build_word(self.state, root, scheme, template) == word:
                node.record_derivative(word)
                return ValidationResult(True, root, scheme)

        return ValidationResult(False, root, None)

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get_derivatives(self, root: str) -> Set[str]:
        """Recorded derivatives formatted as '<word> (f=<frequency>)'."""
        node = self.state.roots.find(normalize_root(root))
        if node is None:
            return set()
        return {str(d) for d in node.derivatives}

    def get_roots_list(self) -> List[str]:
        return self.state.roots.list()

    def get_schemes_list(self) -> List[str]:
        return sorted(self.state.patterns.keys())

    def get_schemes_with_rules(self) -> Dict[str, str]:
        """Scheme name -> template, in pattern store order."""
        return dict(self.state.patterns.all())

    def get_tree_structure(self) -> Optional[Dict]:
        return self.state.roots.structure()

    def get_hash_structure(self) -> List[List[Dict[str, str]]]:
        return self.state.patterns.buckets()

    def compute_statistics(self) -> MorphologyStatistics:
        return compute_statistics(self.state)

    # =========================================================================
    # SCHEME ADMINISTRATION
    # =========================================================================

    def add_scheme(self, name: str, template: str) -> None:
        """Add a scheme, or replace the template of an existing one."""
        self.state.patterns.put(name, template)
        logger.info(f"Scheme saved: {name}={template}")
        self._persist_schemes()

    def update_scheme(self, name: str, template: str) -> None:
        if self.state.patterns.get(name) is None:
            raise SchemeNotFound(name)
        self.state.patterns.put(name, template)
        logger.info(f"Scheme updated: {name}={template}")
        self._persist_schemes()

    def delete_scheme(self, name: str) -> None:
        if self.state.patterns.get(name) is None:
            raise SchemeNotFound(name)
        self.state.patterns.remove(name)
        logger.info(f"Scheme deleted: {name}")
        self._persist_schemes()

    # =========================================================================
    # TRANSFORMATION ADMINISTRATION
    # =========================================================================

    def get_all_transformation_groups(self) -> List[TransformationGroup]:
        return self.state.transformations.groups()

    def get_transformation_group(self, key: str) -> Optional[TransformationGroup]:
        return self.state.transformations.get(key)

    def save_transformation_group(
        self, group: Union[TransformationGroup, Dict]
    ) -> TransformationGroup:
        """Insert or replace a group by key (case-insensitive)."""
        if isinstance(group, dict):
            group = TransformationGroup.from_dict(group)
        saved = self.state.transformations.save(group)
        logger.info(f"Transformation group saved: {saved.key} ({len(saved.rules)} rules)")
        self._persist_transformations()
        return saved

    def delete_transformation_group(self, key: str) -> bool:
        """Delete a group; False if no group has this key."""
        removed = self.state.transformations.delete(key)
        if removed:
            logger.info(f"Transformation group deleted: {key}")
            self._persist_transformations()
        return removed

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def _persist_schemes(self) -> None:
        if self.persistence is None:
            return
        try:
            self.persistence.write_schemes(serialize_schemes(self.state.patterns.all()))
        except PersistenceError:
            logger.error("Scheme change kept in memory but not saved")
            raise

    def _persist_transformations(self) -> None:
        if self.persistence is None:
            return
        try:
            self.persistence.write_transformations(self.state.transformations.lines())
        except PersistenceError:
            logger.error("Transformation change kept in memory but not saved")
            raise
