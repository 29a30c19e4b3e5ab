#!/usr/bin/env python3
"""
Mizan command line.

Usage:
    mizan generate كتب فاعل
    mizan generate-all قول
    mizan validate كتب مكتوب
    mizan --data-dir data add-scheme مفعال "م{1}{2}ا{3}"
    mizan --data-dir data save-group "naqis_مفعال" "replace_final=ى" --comment "..."
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config
from .data import default_root_lines, default_scheme_lines, default_transformation_lines
from .definitions import parse_schemes, serialize_schemes
from .engine import MorphologyEngine
from .errors import MorphologyError
from .persistence import DefinitionFiles
from .root_types import classify_root, normalize_root
from .transformations import TransformationGroup, parse_rules

logger = logging.getLogger(__name__)


def _print_json(data) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


# =============================================================================
# COMMANDS
# =============================================================================

def cmd_generate(engine: MorphologyEngine, args) -> None:
    print(engine.generate(args.root, args.scheme))


def cmd_generate_all(engine: MorphologyEngine, args) -> None:
    for word in engine.generate_all(args.root):
        print(word)


def cmd_validate(engine: MorphologyEngine, args) -> None:
    _print_json(engine.validate(args.root, args.word).to_dict())


def cmd_classify(engine: MorphologyEngine, args) -> None:
    root_type = classify_root(normalize_root(args.root))
    print(f"{root_type.name} ({root_type.label_ar})")


def cmd_derivatives(engine: MorphologyEngine, args) -> None:
    for item in sorted(engine.get_derivatives(args.root)):
        print(item)


def cmd_roots(engine: MorphologyEngine, args) -> None:
    for root in engine.get_roots_list():
        print(root)


def cmd_schemes(engine: MorphologyEngine, args) -> None:
    templates = engine.get_schemes_with_rules()
    for name in engine.get_schemes_list():
        print(f"{name}={templates[name]}")


def cmd_add_scheme(engine: MorphologyEngine, args) -> None:
    engine.add_scheme(args.name, args.template)
    print(f"Scheme saved: {args.name}")


def cmd_update_scheme(engine: MorphologyEngine, args) -> None:
    engine.update_scheme(args.name, args.template)
    print(f"Scheme updated: {args.name}")


def cmd_delete_scheme(engine: MorphologyEngine, args) -> None:
    engine.delete_scheme(args.name)
    print(f"Scheme deleted: {args.name}")


def cmd_groups(engine: MorphologyEngine, args) -> None:
    for line in engine.state.transformations.lines():
        print(line)


def cmd_group(engine: MorphologyEngine, args) -> int:
    group = engine.get_transformation_group(args.key)
    if group is None:
        print(f"error: no transformation group '{args.key}'", file=sys.stderr)
        return 1
    _print_json(group.to_dict())
    return 0


def cmd_save_group(engine: MorphologyEngine, args) -> None:
    group = TransformationGroup(key=args.key, rules=parse_rules(args.rules),
                                comment=args.comment)
    saved = engine.save_transformation_group(group)
    print(f"Transformation group saved: {saved.key} ({len(saved.rules)} rules)")


def cmd_delete_group(engine: MorphologyEngine, args) -> int:
    if not engine.delete_transformation_group(args.key):
        print(f"error: no transformation group '{args.key}'", file=sys.stderr)
        return 1
    print(f"Transformation group deleted: {args.key}")
    return 0


def cmd_stats(engine: MorphologyEngine, args) -> None:
    _print_json(engine.compute_statistics().to_dict())


def cmd_debug_tree(engine: MorphologyEngine, args) -> None:
    _print_json(engine.get_tree_structure())


def cmd_debug_hash(engine: MorphologyEngine, args) -> None:
    _print_json(engine.get_hash_structure())


def cmd_init(cfg: Config, args) -> int:
    """Write the built-in definitions into the data directory."""
    if cfg.data_dir is None:
        print("error: init needs --data-dir", file=sys.stderr)
        return 1

    files = DefinitionFiles.from_config(cfg)
    targets = [files.roots_path, files.schemes_path, files.transformations_path]
    existing = [str(p) for p in targets if p.exists()]
    if existing and not args.force:
        print(f"error: already exists: {', '.join(existing)} (use --force)", file=sys.stderr)
        return 1

    files.write_roots(default_root_lines())
    files.write_schemes(serialize_schemes(parse_schemes(default_scheme_lines())))
    files.write_transformations(default_transformation_lines())
    print(f"Definitions written to {cfg.data_dir}")
    return 0


# =============================================================================
# ENTRY POINT
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mizan', description='Arabic derived word generation from roots and schemes')
    parser.add_argument('--data-dir', type=Path, default=None,
                        help='Directory with racines.txt, schemes.txt, transformations.txt')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (default: MIZAN_LOG_LEVEL or INFO)')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('generate', help='Generate one word')
    p.add_argument('root')
    p.add_argument('scheme')
    p.set_defaults(func=cmd_generate)

    p = sub.add_parser('generate-all', help='Generate a word for every scheme')
    p.add_argument('root')
    p.set_defaults(func=cmd_generate_all)

    p = sub.add_parser('validate', help='Check whether a word derives from a root')
    p.add_argument('root')
    p.add_argument('word')
    p.set_defaults(func=cmd_validate)

    p = sub.add_parser('classify', help='Show the root type')
    p.add_argument('root')
    p.set_defaults(func=cmd_classify)

    p = sub.add_parser('derivatives', help='Recorded derivatives of a root')
    p.add_argument('root')
    p.set_defaults(func=cmd_derivatives)

    sub.add_parser('roots', help='List roots').set_defaults(func=cmd_roots)
    sub.add_parser('schemes', help='List schemes').set_defaults(func=cmd_schemes)

    for name, func, help_text in [
        ('add-scheme', cmd_add_scheme, 'Add or replace a scheme'),
        ('update-scheme', cmd_update_scheme, 'Change an existing scheme'),
    ]:
        p = sub.add_parser(name, help=help_text)
        p.add_argument('name')
        p.add_argument('template', help='Template using {1} {2} {3}')
        p.set_defaults(func=func)

    p = sub.add_parser('delete-scheme', help='Delete a scheme')
    p.add_argument('name')
    p.set_defaults(func=cmd_delete_scheme)

    sub.add_parser('groups', help='List transformation groups').set_defaults(func=cmd_groups)

    p = sub.add_parser('group', help='Show one transformation group')
    p.add_argument('key')
    p.set_defaults(func=cmd_group)

    p = sub.add_parser('save-group', help='Add or replace a transformation group')
    p.add_argument('key')
    p.add_argument('rules', help="Rules, e.g. 'replace=او>ائ;replace_final=ي'")
    p.add_argument('--comment', type=str, default=None)
    p.set_defaults(func=cmd_save_group)

    p = sub.add_parser('delete-group', help='Delete a transformation group')
    p.add_argument('key')
    p.set_defaults(func=cmd_delete_group)

    sub.add_parser('stats', help='Engine statistics').set_defaults(func=cmd_stats)
    sub.add_parser('debug-tree', help='Dump the root tree').set_defaults(func=cmd_debug_tree)
    sub.add_parser('debug-hash', help='Dump the scheme buckets').set_defaults(func=cmd_debug_hash)

    p = sub.add_parser('init', help='Write the built-in definitions to --data-dir')
    p.add_argument('--force', action='store_true', help='Overwrite existing files')
    p.set_defaults(func=cmd_init, needs_engine=False)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = Config() if args.data_dir is None else Config(data_dir=args.data_dir)
    if args.log_level:
        cfg.log_level = args.log_level

    logging.basicConfig(
        level=getattr(logging, cfg.log_level.upper(), logging.INFO),
        format=cfg.log_format,
    )

    try:
        if not getattr(args, 'needs_engine', True):
            return args.func(cfg, args) or 0
        engine = MorphologyEngine.from_config(cfg)
        return args.func(engine, args) or 0
    except MorphologyError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
