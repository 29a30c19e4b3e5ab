"""
Tests for root type classification and canonical letters.
"""

import itertools

import pytest

from mizan_morphology.errors import InvalidRoot
from mizan_morphology.root_types import (
    RootType, classify_root, canonical_letters, normalize_root
)


def test_known_roots():
    """Classify real roots of every type."""
    test_cases = [
        # Regular
        ("كتب", RootType.REGULAR),
        ("درس", RootType.REGULAR),
        ("سأل", RootType.REGULAR),
        ("قرأ", RootType.REGULAR),

        # Mithal
        ("وعد", RootType.MITHAL),
        ("يسر", RootType.MITHAL),

        # Ajwaf
        ("قول", RootType.AJWAF),
        ("بيع", RootType.AJWAF),
        ("قال", RootType.AJWAF),

        # Naqis
        ("دعو", RootType.NAQIS),
        ("رمي", RootType.NAQIS),
        ("سعى", RootType.NAQIS),

        # Lafif
        ("وقي", RootType.LAFIF),
        ("روي", RootType.LAFIF),
    ]

    for root, expected in test_cases:
        assert classify_root(root) == expected, root


def test_all_weak_combinations():
    """Every weak/strong combination of the three positions."""
    weak = ('و', 'ا', 'ى')
    strong = ('ك', 'ت', 'ب')

    for flags in itertools.product([False, True], repeat=3):
        root = ''.join(weak[i] if flags[i] else strong[i] for i in range(3))
        if sum(flags) >= 2:
            expected = RootType.LAFIF
        elif flags[0]:
            expected = RootType.MITHAL
        elif flags[1]:
            expected = RootType.AJWAF
        elif flags[2]:
            expected = RootType.NAQIS
        else:
            expected = RootType.REGULAR

        assert classify_root(root) == expected, (root, flags)
        # Deterministic
        assert classify_root(root) == classify_root(root)


def test_weak_sets_depend_on_position():
    # Initial alif is not weak
    assert classify_root("اكل") == RootType.REGULAR
    # Alif maqsura is only weak in final position
    assert classify_root("سىل") == RootType.REGULAR
    assert classify_root("كتى") == RootType.NAQIS
    # Ya is weak everywhere
    assert classify_root("يكت") == RootType.MITHAL
    assert classify_root("كيت") == RootType.AJWAF
    assert classify_root("كتي") == RootType.NAQIS


@pytest.mark.parametrize("root", ["", "كت", "كتبت", "استفعل"])
def test_invalid_length(root):
    with pytest.raises(InvalidRoot):
        classify_root(root)
    with pytest.raises(InvalidRoot):
        canonical_letters(root)


def test_invalid_root_is_value_error():
    with pytest.raises(ValueError):
        classify_root("كت")


def test_canonical_letters():
    assert canonical_letters("كتب") == ('ك', 'ت', 'ب')
    # Medial alif restored to waw
    assert canonical_letters("قال") == ('ق', 'و', 'ل')
    # Only the middle position is restored
    assert canonical_letters("دعا") == ('د', 'ع', 'ا')
    assert canonical_letters("بيع") == ('ب', 'ي', 'ع')


def test_normalize_root():
    assert normalize_root("ك-ت-ب") == "كتب"
    assert normalize_root(" ك ت ب ") == "كتب"
    assert normalize_root("كَتَبَ") == "كتب"
    assert normalize_root("كـتـب") == "كتب"


def test_labels():
    assert RootType.AJWAF.label_ar == "أجوف"
    assert RootType.LAFIF.category == "lafif"
    assert [t.category for t in RootType] == ['regular', 'mithal', 'ajwaf', 'naqis', 'lafif']
