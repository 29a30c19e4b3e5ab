#!/usr/bin/env python3
"""
Arabic Root Type Classification

Root Types (أنواع الجذور):
1. صحيح (Regular) - No weak letter
2. مثال (Mithal) - First radical is و or ي
3. أجوف (Ajwaf) - Second radical is و, ي or ا
4. ناقص (Naqis) - Third radical is و, ي, ا or ى
5. لفيف (Lafif) - Two or more weak radicals

The weak set grows with the position: a final alif maqsura (ى) is weak,
a medial alif is weak, an initial alif never is.
"""

from enum import Enum
from typing import Tuple

from .errors import InvalidRoot


class RootType(Enum):
    """Arabic triliteral root types."""
    REGULAR = "صحيح"       # e.g., كتب، درس
    MITHAL = "مثال"        # e.g., وعد، يسر
    AJWAF = "أجوف"         # e.g., قول، بيع، قال
    NAQIS = "ناقص"         # e.g., دعو، رمي، سعى
    LAFIF = "لفيف"         # e.g., وقي، روي

    @property
    def label_ar(self) -> str:
        return self.value

    @property
    def category(self) -> str:
        """Prefix used in transformation group keys (e.g. 'ajwaf')."""
        return self.name.lower()


WAW = 'و'
YA = 'ي'
ALIF = 'ا'
ALIF_MAQSURA = 'ى'

# Weak letters by position (fa', 'ayn, lam)
WEAK_FIRST = frozenset({WAW, YA})
WEAK_MIDDLE = frozenset({WAW, YA, ALIF})
WEAK_LAST = frozenset({WAW, YA, ALIF, ALIF_MAQSURA})

TATWEEL = 'ـ'
DIACRITICS = 'ًٌٍَُِّْٰ'


def normalize_root(root: str) -> str:
    """
    Normalize a root string:
    - Remove dashes, spaces and tatweel
    - Remove diacritics (tashkeel)
    """
    root = ''.join(root.split())
    root = root.replace('-', '').replace(TATWEEL, '')
    for d in DIACRITICS:
        root = root.replace(d, '')
    return root


def _check_length(root: str) -> None:
    if root is None or len(root) != 3:
        raise InvalidRoot(root)


def weak_positions(root: str) -> Tuple[bool, bool, bool]:
    """Return which of the three positions hold a weak letter."""
    _check_length(root)
    fa, ain, lam = root
    return fa in WEAK_FIRST, ain in WEAK_MIDDLE, lam in WEAK_LAST


def classify_root(root: str) -> RootType:
    """
    Classify a triliteral root by the position of its weak letters.

    Args:
        root: The root string (e.g., "كتب", "قول", "وقي")

    Returns:
        The RootType

    Raises:
        InvalidRoot: if the root is not exactly 3 letters
    """
    weak_fa, weak_ain, weak_lam = weak_positions(root)

    if weak_fa + weak_ain + weak_lam >= 2:
        return RootType.LAFIF
    if weak_fa:
        return RootType.MITHAL
    if weak_ain:
        return RootType.AJWAF
    if weak_lam:
        return RootType.NAQIS
    return RootType.REGULAR


def canonical_letters(root: str) -> Tuple[str, str, str]:
    """
    Letters used to fill a scheme template.

    A medial alif almost always stands for an elided waw (قال from قول),
    so it is restored before the template is filled.
    """
    _check_length(root)
    fa, ain, lam = root
    if ain == ALIF:
        ain = WAW
    return fa, ain, lam
