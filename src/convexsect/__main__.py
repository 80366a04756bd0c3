#!/usr/bin/env python3
"""
CLI for classifying and exporting convexsect scenes.

Usage:
    python -m convexsect check SCENE.yaml
    python -m convexsect export SCENE.yaml OUT.dxf
    python -m convexsect demo NAME [--out FILE]

Examples:
    # write the triangle demo scene and classify it
    python -m convexsect demo triangles --out triangles.yaml
    python -m convexsect check triangles.yaml

    # render it, intersecting shapes in red
    python -m convexsect export triangles.yaml triangles.dxf
"""

import argparse
import logging
import sys

import yaml

logger = logging.getLogger(__name__)


def cmd_check(args) -> int:
    from .scene import load_scene

    scene = load_scene(args.file)
    for i, j in scene.hits:
        print(f"intersect: {i} {scene.shapes[i].kind} <-> {j} {scene.shapes[j].kind}")
    for i, shape in enumerate(scene.shapes):
        print(f"{i}: {shape.kind} {shape.color}")
    return 0


def cmd_export(args) -> int:
    from .scene import load_scene, render_scene

    scene = load_scene(args.file)
    out = render_scene(scene, args.output)
    print(f"wrote {out}")
    return 0


def cmd_demo(args) -> int:
    from .scene import demo_scene

    scene = demo_scene(args.name)
    if args.out:
        scene.save(args.out)
        print(f"wrote {args.out}")
    else:
        yaml.safe_dump(scene.to_dict(), sys.stdout, sort_keys=False)
    return 0


def main(argv=None):
    from .scene import DEMO_SCENES

    parser = argparse.ArgumentParser(
        prog='python -m convexsect',
        description='convex shape intersection scenes',
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='action', required=True)

    check_parser = subparsers.add_parser('check', help='Classify the shapes in a scene file')
    check_parser.add_argument('file', help='YAML scene file')

    export_parser = subparsers.add_parser('export', help='Classify a scene and write it as DXF')
    export_parser.add_argument('file', help='YAML scene file')
    export_parser.add_argument('output', help='DXF output file')

    demo_parser = subparsers.add_parser('demo', help='Write a built-in demo scene')
    demo_parser.add_argument('name', choices=sorted(DEMO_SCENES), help='Demo scene name')
    demo_parser.add_argument('-o', '--out', metavar='FILE',
                             help='YAML output file (default: stdout)')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    commands = {
        'check': cmd_check,
        'export': cmd_export,
        'demo': cmd_demo,
    }
    try:
        return commands[args.action](args)
    except (FileNotFoundError, ValueError) as e:
        logger.debug("command %s failed", args.action, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
