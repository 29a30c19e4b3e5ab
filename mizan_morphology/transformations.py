"""
Transformation Rules

Rewrite rules applied after a scheme template has been filled, grouped under
a context key:

    ajwaf_فاعل:replace=او>ائ
    naqis_مفعول:replace=وي>يّ;replace=وو>وّ
    # passive participle of defective roots
    exception_سأل_مفعول:replace=أو>ؤو

Keys are either <category>_<scheme> (category is the lowercase root type)
or exception_<root>_<scheme>. Comment lines following a header describe
that group.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

REPLACE = 'replace'
REPLACE_FINAL = 'replace_final'
RULE_TYPES = (REPLACE, REPLACE_FINAL)


@dataclass
class TransformationRule:
    """A single rewrite step."""
    type: str
    to: str
    source: Optional[str] = None  # 'from' in files and dicts
    order: int = 0
    comment: Optional[str] = None

    def __post_init__(self):
        if self.type not in RULE_TYPES:
            raise ValueError(f"Unknown rule type: {self.type}")
        if self.type == REPLACE and not self.source:
            raise ValueError("A replace rule needs a non-empty source")
        if self.type == REPLACE_FINAL:
            self.source = None

    @classmethod
    def replace(cls, source: str, to: str, order: int = 0) -> 'TransformationRule':
        return cls(REPLACE, to, source=source, order=order)

    @classmethod
    def replace_final(cls, to: str, order: int = 0) -> 'TransformationRule':
        return cls(REPLACE_FINAL, to, order=order)

    def apply(self, word: str) -> str:
        if self.type == REPLACE_FINAL:
            if not word:
                return word
            return word[:-1] + self.to
        return word.replace(self.source, self.to)

    def to_clause(self) -> str:
        if self.type == REPLACE_FINAL:
            return f"{REPLACE_FINAL}={self.to}"
        return f"{REPLACE}={self.source}>{self.to}"

    def to_dict(self) -> Dict:
        data = {'type': self.type, 'to': self.to, 'order': self.order}
        if self.type == REPLACE:
            data['from'] = self.source
        if self.comment:
            data['comment'] = self.comment
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'TransformationRule':
        return cls(
            type=data['type'],
            to=data.get('to', ''),
            source=data.get('from'),
            order=int(data.get('order', 0)),
            comment=data.get('comment'),
        )


@dataclass
class TransformationGroup:
    """Ordered rules applied together for one context key."""
    key: str
    rules: List[TransformationRule] = field(default_factory=list)
    comment: Optional[str] = None

    def add_rule(self, rule: TransformationRule) -> None:
        """Append a rule, giving it the next order index."""
        rule.order = len(self.rules)
        self.rules.append(rule)

    def ordered_rules(self) -> List[TransformationRule]:
        return sorted(self.rules, key=lambda r: r.order)

    def apply(self, word: str) -> str:
        for rule in self.ordered_rules():
            word = rule.apply(word)
        return word

    def renumber(self) -> None:
        """Sort rules by order and reassign indices 0..n-1."""
        self.rules = self.ordered_rules()
        for i, rule in enumerate(self.rules):
            rule.order = i

    def append_comment(self, text: str) -> None:
        self.comment = text if self.comment is None else f"{self.comment}\n{text}"

    def to_dict(self) -> Dict:
        return {
            'key': self.key,
            'rules': [rule.to_dict() for rule in self.ordered_rules()],
            'comment': self.comment,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'TransformationGroup':
        rules = [TransformationRule.from_dict(r) for r in data.get('rules') or []]
        return cls(key=data['key'], rules=rules, comment=data.get('comment'))


# =============================================================================
# PARSING
# =============================================================================

def parse_rules(text: str) -> List[TransformationRule]:
    """
    Parse a ';'-separated rule list.

    Accepted rules are numbered from 0. Empty clauses are skipped; malformed
    ones are skipped with a warning.
    """
    rules = []
    for clause in text.split(';'):
        clause = clause.strip()
        if not clause:
            continue

        if clause.startswith(REPLACE_FINAL + '='):
            to = clause[len(REPLACE_FINAL) + 1:].strip()
            rules.append(TransformationRule.replace_final(to, order=len(rules)))
        elif clause.startswith(REPLACE + '='):
            operands = clause[len(REPLACE) + 1:].split('>', 1)
            if len(operands) != 2 or not operands[0].strip():
                logger.warning(f"Skipping malformed replace rule: {clause}")
                continue
            rules.append(TransformationRule.replace(
                operands[0].strip(), operands[1].strip(), order=len(rules)))
        else:
            logger.warning(f"Skipping unknown rule: {clause}")
    return rules


def parse_transformations(lines: Iterable[str]) -> List[TransformationGroup]:
    """Parse transformation definition lines into groups, in file order."""
    groups = []
    current = None

    for line in lines:
        line = line.strip()
        if not line:
            continue

        if line.startswith('#'):
            if current is not None:
                current.append_comment(line[1:].strip())
            continue

        if ':' in line:
            key, rules_text = line.split(':', 1)
            current = TransformationGroup(key=key.strip())
            current.rules = parse_rules(rules_text.strip())
            groups.append(current)
        else:
            logger.warning(f"Ignoring line outside the header grammar: {line}")

    return groups


def serialize_transformations(groups: Iterable[TransformationGroup]) -> List[str]:
    """
    Lines for a transformation file.

    Comments are written after their header, which is where the parser
    attaches them.
    """
    lines = []
    for group in groups:
        clauses = ';'.join(rule.to_clause() for rule in group.ordered_rules())
        lines.append(f"{group.key}:{clauses}")
        if group.comment is not None:
            for comment_line in group.comment.split('\n'):
                lines.append(f"# {comment_line.strip()}")
    return lines


# =============================================================================
# REGISTRY
# =============================================================================

class TransformationRegistry:
    """
    Ordered list of transformation groups plus a key -> group index.

    The index is rebuilt after every structural change. Administrative lookups
    (get/save/delete) match keys case-insensitively; lookup() used during
    generation is exact.
    """

    def __init__(self, groups: Optional[Iterable[TransformationGroup]] = None):
        self._groups: List[TransformationGroup] = list(groups or [])
        self._index: Dict[str, TransformationGroup] = {}
        self.rebuild()

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> 'TransformationRegistry':
        return cls(parse_transformations(lines))

    def rebuild(self) -> None:
        """Re-derive the key index; a later group with the same key wins."""
        self._index = {group.key: group for group in self._groups}

    def replace_all(self, groups: Iterable[TransformationGroup]) -> None:
        self._groups = list(groups)
        self.rebuild()

    def lookup(self, key: str) -> Optional[TransformationGroup]:
        return self._index.get(key)

    def has(self, key: str) -> bool:
        return key in self._index

    def apply(self, word: str, key: str) -> str:
        """Apply the group stored under key; absent groups leave word as is."""
        group = self._index.get(key)
        if group is None:
            return word
        return group.apply(word)

    def groups(self) -> List[TransformationGroup]:
        return list(self._groups)

    def get(self, key: str) -> Optional[TransformationGroup]:
        wanted = key.casefold()
        for group in self._groups:
            if group.key.casefold() == wanted:
                return group
        return None

    def save(self, group: TransformationGroup) -> TransformationGroup:
        """Insert or replace a group (appended at the end of the list)."""
        wanted = group.key.casefold()
        self._groups = [g for g in self._groups if g.key.casefold() != wanted]
        group.renumber()
        self._groups.append(group)
        self.rebuild()
        return group

    def delete(self, key: str) -> bool:
        wanted = key.casefold()
        kept = [g for g in self._groups if g.key.casefold() != wanted]
        removed = len(kept) != len(self._groups)
        if removed:
            self._groups = kept
            self.rebuild()
        return removed

    def lines(self) -> List[str]:
        return serialize_transformations(self._groups)

    def __len__(self):
        return len(self._groups)

    def __contains__(self, key):
        return self.has(key)
