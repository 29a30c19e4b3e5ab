"""
Arabic Word Generator

Builds a derived word from a root and a scheme template:

1. Restore the canonical root letters (medial alif -> waw)
2. Fill the {1} {2} {3} placeholders of the template
3. Apply the transformation groups for the root type
4. Apply the root-specific exception group, if any
5. Write tanween on weak active participles (رامي -> رامٍ)
"""

import logging
from dataclasses import dataclass, field
from typing import List

from .pattern_store import PatternStore
from .root_store import RootStore
from .root_types import RootType, canonical_letters, classify_root
from .transformations import TransformationRegistry

logger = logging.getLogger(__name__)

ACTIVE_PARTICIPLE = 'فاعل'
YA = 'ي'
KASRATAN = 'ٍ'

# Root types whose active participle ends in tanween instead of ya
TANWEEN_TYPES = frozenset({RootType.NAQIS, RootType.LAFIF, RootType.AJWAF})


@dataclass
class EngineState:
    """The three stores, owned together for the lifetime of the process."""
    roots: RootStore = field(default_factory=RootStore)
    patterns: PatternStore = field(default_factory=PatternStore)
    transformations: TransformationRegistry = field(default_factory=TransformationRegistry)


def fill_template(template: str, letters) -> str:
    """Substitute root letters for {1}, {2} and {3}."""
    fa, ain, lam = letters
    return template.replace('{1}', fa).replace('{2}', ain).replace('{3}', lam)


def group_keys(root: str, root_type: RootType, scheme: str,
               registry: TransformationRegistry) -> List[str]:
    """Group keys to apply, in order, for a root of the given type."""
    if root_type == RootType.LAFIF:
        keys = [f"mithal_{scheme}", f"lafif_{scheme}"]
        if not registry.has(f"lafif_{scheme}"):
            keys.append(f"naqis_{scheme}")
    else:
        keys = [f"{root_type.category}_{scheme}"]

    keys.append(f"exception_{root}_{scheme}")
    return keys


def add_tanween(word: str, scheme: str, root_type: RootType) -> str:
    """Final ya of a weak active participle becomes kasratan."""
    if scheme == ACTIVE_PARTICIPLE and root_type in TANWEEN_TYPES and word.endswith(YA):
        return word[:-1] + KASRATAN
    return word


def build_word(state: EngineState, root: str, scheme: str, template: str) -> str:
    """
    Build the word for a root and scheme without touching derivative counts.

    Args:
        state: Engine stores (only the transformation registry is read)
        root: Normalized 3-letter root
        scheme: Scheme name, used to select transformation groups
        template: The scheme's template

    Returns:
        The generated word
    """
    word = fill_template(template, canonical_letters(root))
    root_type = classify_root(root)

    for key in group_keys(root, root_type, scheme, state.transformations):
        word = state.transformations.apply(word, key)

    word = add_tanween(word, scheme, root_type)
    logger.debug(f"{root} + {scheme} ({root_type.name}) -> {word}")
    return word
