#!/usr/bin/env python3
"""gitrepo CLI entrypoint."""

import sys
import logging
import argparse
from pathlib import Path

from gitrepo.git.errors import GitError
from gitrepo.lib.config import load_config, set_config
from gitrepo.repository import Repository


def cmd_branch(repo: Repository, args) -> int:
    print(repo.branch())
    return 0


def cmd_remote(repo: Repository, args) -> int:
    print(repo.remote(args.name))
    return 0


def cmd_add_remote(repo: Repository, args) -> int:
    repo.add_remote(args.name, args.url)
    return 0


def cmd_rev_parse(repo: Repository, args) -> int:
    ref = repo.rev_parse(args.ref)
    if not ref:
        return 1
    print(ref)
    return 0


def cmd_ref_exists(repo: Repository, args) -> int:
    exists = repo.ref_exists(args.ref)
    print("yes" if exists else "no")
    return 0 if exists else 1


def cmd_has_diff(repo: Repository, args) -> int:
    dirty = repo.has_local_diff()
    print("yes" if dirty else "no")
    return 0 if dirty else 1


def cmd_log(repo: Repository, args) -> int:
    for c in repo.log(args.start, args.end):
        print(f"{c.ref} {c.message}")
    return 0


def cmd_fetch(repo: Repository, args) -> int:
    repo.fetch(args.remote)
    return 0


def cmd_pull(repo: Repository, args) -> int:
    repo.pull(args.remote)
    return 0


def cmd_merge(repo: Repository, args) -> int:
    repo.merge(args.ref)
    return 0


def cmd_checkout(repo: Repository, args) -> int:
    repo.checkout(args.ref, args.remote)
    return 0


def cmd_reset_hard(repo: Repository, args) -> int:
    repo.reset_hard(args.ref)
    return 0


def cmd_origin(repo: Repository, args) -> int:
    info = repo.remote_origin()
    print(f"{info.owner}/{info.name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='gitrepo', description='Typed git queries for a checkout')
    parser.add_argument('-C', dest='path', default='.', help='Repository path (default: current directory)')
    parser.add_argument('--config', help='Env file with GIT_BINARY / GIT_TIMEOUT')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log every git invocation')
    subparsers = parser.add_subparsers(dest='command', required=True)

    p = subparsers.add_parser('branch', help='Print current branch')
    p.set_defaults(func=cmd_branch)

    p = subparsers.add_parser('remote', help='Print URL of a remote')
    p.add_argument('name', help='Remote name')
    p.set_defaults(func=cmd_remote)

    p = subparsers.add_parser('add-remote', help='Add a remote')
    p.add_argument('name', help='Remote name')
    p.add_argument('url', help='Remote URL')
    p.set_defaults(func=cmd_add_remote)

    p = subparsers.add_parser('rev-parse', help='Resolve a ref (exit 1 if unresolved)')
    p.add_argument('ref', help='Ref expression')
    p.set_defaults(func=cmd_rev_parse)

    p = subparsers.add_parser('ref-exists', help='Check whether a ref resolves')
    p.add_argument('ref', help='Ref expression')
    p.set_defaults(func=cmd_ref_exists)

    p = subparsers.add_parser('has-diff', help='Check for changes vs HEAD')
    p.set_defaults(func=cmd_has_diff)

    p = subparsers.add_parser('log', help='List commits in START..END, newest first')
    p.add_argument('start', help='Excluded start ref')
    p.add_argument('end', help='Included end ref')
    p.set_defaults(func=cmd_log)

    p = subparsers.add_parser('fetch', help='Fetch from a remote')
    p.add_argument('remote', nargs='?', default='', help='Remote name (default: git default)')
    p.set_defaults(func=cmd_fetch)

    p = subparsers.add_parser('pull', help='Pull from a remote')
    p.add_argument('remote', help='Remote name')
    p.set_defaults(func=cmd_pull)

    p = subparsers.add_parser('merge', help='Merge a ref into the current branch')
    p.add_argument('ref', help='Ref to merge')
    p.set_defaults(func=cmd_merge)

    p = subparsers.add_parser('checkout', help='Switch to a ref, optionally recreating it from a remote')
    p.add_argument('ref', help='Branch or ref')
    p.add_argument('remote', nargs='?', default='', help='Remote ref to track (e.g. origin/main)')
    p.set_defaults(func=cmd_checkout)

    p = subparsers.add_parser('reset-hard', help='Reset index and working tree to a ref')
    p.add_argument('ref', help='Target ref')
    p.set_defaults(func=cmd_reset_hard)

    p = subparsers.add_parser('origin', help='Print owner/name of the origin remote')
    p.set_defaults(func=cmd_origin)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.config:
        try:
            set_config(load_config(Path(args.config)))
        except (FileNotFoundError, ValueError) as e:
            print(f"ERROR: Invalid config: {e}", file=sys.stderr)
            return 2

    repo = Repository(Path(args.path))
    try:
        return args.func(repo, args)
    except GitError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
