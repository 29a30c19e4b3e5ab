"""
Tests for the transformation grammar and registry.
"""

import pytest

from mizan_morphology.data import default_transformation_lines
from mizan_morphology.transformations import (
    TransformationGroup, TransformationRegistry, TransformationRule,
    parse_rules, parse_transformations, serialize_transformations,
)


def test_parse_rules():
    rules = parse_rules("replace=او>ائ; replace_final=ي ;replace=a>b>c")

    assert [r.type for r in rules] == ['replace', 'replace_final', 'replace']
    assert [r.order for r in rules] == [0, 1, 2]
    assert (rules[0].source, rules[0].to) == ('او', 'ائ')
    assert rules[1].source is None and rules[1].to == 'ي'
    # Split on the first '>' only
    assert (rules[2].source, rules[2].to) == ('a', 'b>c')


def test_parse_rules_skips_bad_clauses():
    rules = parse_rules("replace=ab;unknown=1;;replace_final=x;")
    assert len(rules) == 1
    assert rules[0].type == 'replace_final'
    assert rules[0].order == 0


def test_parse_groups_and_comments():
    lines = [
        "# header comment, no group yet",
        "",
        "ajwaf_فاعل:replace=او>ائ",
        "# first line",
        "#   second line  ",
        "naqis_فاعل: replace_final=ي",
        "stray line without colon",
        "# naqis comment",
        "empty_group:",
    ]
    groups = parse_transformations(lines)

    assert [g.key for g in groups] == ['ajwaf_فاعل', 'naqis_فاعل', 'empty_group']
    assert groups[0].comment == "first line\nsecond line"
    assert groups[1].comment == "naqis comment"
    assert groups[1].rules[0].type == 'replace_final'
    assert groups[2].rules == []
    assert groups[2].comment is None


def test_header_split_on_first_colon():
    groups = parse_transformations(["k:replace=:>x"])
    assert groups[0].key == 'k'
    assert groups[0].rules[0].source == ':'


def test_serialize():
    group = TransformationGroup('naqis_مفعول', comment="line one\nline two")
    group.add_rule(TransformationRule.replace('وو', 'وّ'))
    group.add_rule(TransformationRule.replace_final('ي'))

    assert serialize_transformations([group]) == [
        "naqis_مفعول:replace=وو>وّ;replace_final=ي",
        "# line one",
        "# line two",
    ]


def test_default_file_reparses_identically():
    groups = parse_transformations(default_transformation_lines())
    reparsed = parse_transformations(serialize_transformations(groups))
    assert [g.to_dict() for g in reparsed] == [g.to_dict() for g in groups]


def test_rule_application():
    assert TransformationRule.replace('و', 'ي').apply('ووا') == 'ييا'
    assert TransformationRule.replace_final('ي').apply('داعو') == 'داعي'
    assert TransformationRule.replace_final('ي').apply('') == ''


def test_group_applies_by_order():
    group = TransformationGroup('k', rules=[
        TransformationRule.replace('b', 'c', order=1),
        TransformationRule.replace('a', 'b', order=0),
    ])
    # a->b first, then b->c
    assert group.apply('a') == 'c'


def test_rule_validation():
    with pytest.raises(ValueError):
        TransformationRule('swap', 'x')
    with pytest.raises(ValueError):
        TransformationRule('replace', 'x', source='')


def test_rule_dict_uses_from():
    rule = TransformationRule.replace('او', 'ائ', order=3)
    data = rule.to_dict()
    assert data == {'type': 'replace', 'to': 'ائ', 'order': 3, 'from': 'او'}
    assert TransformationRule.from_dict(data) == rule
    assert 'from' not in TransformationRule.replace_final('ي').to_dict()


# =============================================================================
# REGISTRY
# =============================================================================

def _registry():
    return TransformationRegistry.from_lines([
        "ajwaf_فاعل:replace=او>ائ",
        "naqis_فاعل:replace_final=ي",
    ])


def test_lookup_and_apply():
    registry = _registry()
    assert registry.has('ajwaf_فاعل')
    assert registry.lookup('AJWAF_فاعل') is None
    assert registry.apply('قاول', 'ajwaf_فاعل') == 'قائل'
    # Absent group is a no-op
    assert registry.apply('قاول', 'lafif_فاعل') == 'قاول'


def test_later_duplicate_wins():
    registry = TransformationRegistry.from_lines(["k:replace=a>b", "k:replace=a>c"])
    assert len(registry) == 2
    assert registry.apply('a', 'k') == 'c'


def test_get_is_case_insensitive():
    registry = _registry()
    assert registry.get('AJWAF_فاعل').key == 'ajwaf_فاعل'
    assert registry.get('missing') is None


def test_save_replaces_and_rebuilds():
    registry = _registry()
    group = TransformationGroup('AJWAF_فاعل', rules=[
        TransformationRule.replace('و', 'ئ', order=5),
        TransformationRule.replace('x', 'y', order=2),
    ])
    registry.save(group)

    keys = [g.key for g in registry.groups()]
    assert keys == ['naqis_فاعل', 'AJWAF_فاعل']
    assert not registry.has('ajwaf_فاعل')
    assert registry.has('AJWAF_فاعل')
    # Renumbered in ascending order
    assert [(r.source, r.order) for r in group.rules] == [('x', 0), ('و', 1)]


def test_delete():
    registry = _registry()
    assert registry.delete('NAQIS_فاعل') is True
    assert not registry.has('naqis_فاعل')
    assert registry.delete('naqis_فاعل') is False
    assert len(registry) == 1


def test_replace_all():
    registry = _registry()
    registry.replace_all(parse_transformations(["x:replace=a>b"]))
    assert not registry.has('ajwaf_فاعل')
    assert 'x' in registry
    assert registry.lines() == ["x:replace=a>b"]
