"""
Root and scheme definition grammar.

Roots: one root per line.
Schemes: one <name>=<template> per line, placeholders {1} {2} {3}.
Blank lines and lines starting with '#' are ignored in both.
"""

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from .root_types import normalize_root

logger = logging.getLogger(__name__)


def _content_lines(lines: Iterable[str]) -> Iterable[str]:
    for line in lines:
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        yield line


def parse_roots(lines: Iterable[str]) -> List[str]:
    """Normalized roots, skipping lines that are not 3 letters."""
    roots = []
    for line in _content_lines(lines):
        root = normalize_root(line)
        if len(root) != 3:
            logger.warning(f"Skipping root '{line}': expected 3 letters")
            continue
        roots.append(root)
    return roots


def parse_schemes(lines: Iterable[str]) -> List[Tuple[str, str]]:
    """(name, template) pairs in file order."""
    schemes = []
    for line in _content_lines(lines):
        parts = line.split('=')
        if len(parts) != 2:
            logger.warning(f"Skipping malformed scheme line: {line}")
            continue
        name, template = parts[0].strip(), parts[1].strip()
        if not name:
            logger.warning(f"Skipping scheme line without a name: {line}")
            continue
        schemes.append((name, template))
    return schemes


def serialize_schemes(schemes: Iterable[Tuple[str, str]],
                      generated_at: Optional[datetime] = None) -> List[str]:
    """Lines for a scheme file: a dated header, a blank line, the entries."""
    stamp = (generated_at or datetime.now()).isoformat(sep=' ', timespec='seconds')
    lines = [f"# schemes.txt - generated {stamp}", ""]
    lines.extend(f"{name}={template}" for name, template in schemes)
    return lines
