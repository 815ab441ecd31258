#!/usr/bin/env python3
"""semid — semantic ID encoding from the command line."""

import argparse
import json
import logging
import sys

from semid import alphabet, prefix
from semid.codec import IDCodec


def _codec(args) -> IDCodec:
    return IDCodec(tuple(args.name))


def cmd_encode(args):
    value = args.value.encode() if args.text else bytes.fromhex(args.value)
    print(_codec(args).encode(value))


def cmd_decode(args):
    value = _codec(args).decode(args.id)
    if args.text:
        print(value.decode(errors="replace"))
    else:
        print(value.hex())


def cmd_check(args):
    valid = _codec(args).can_decode(args.id)
    print("valid" if valid else "invalid")
    sys.exit(0 if valid else 1)


def cmd_prefix(args):
    print(prefix.get_prefix(args.id))


def cmd_tables(args):
    json.dump(alphabet.render_tables(), sys.stdout, indent=2)
    print()


def main():
    parser = argparse.ArgumentParser(prog="semid", description="Encode and decode semantic IDs")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    # encode
    p = sub.add_parser("encode", help="Encode bytes as a semantic ID")
    p.add_argument("value", help="Hex bytes (or text with --text)")
    p.add_argument("-n", "--name", action="append", default=[], help="Name segment (repeatable)")
    p.add_argument("--text", action="store_true", help="Treat value as UTF-8 text")
    p.set_defaults(func=cmd_encode)

    # decode
    p = sub.add_parser("decode", help="Decode a semantic ID")
    p.add_argument("id")
    p.add_argument("-n", "--name", action="append", default=[], help="Name segment (repeatable)")
    p.add_argument("--text", action="store_true", help="Print the payload as UTF-8 text")
    p.set_defaults(func=cmd_decode)

    # check
    p = sub.add_parser("check", help="Check that a semantic ID decodes")
    p.add_argument("id")
    p.add_argument("-n", "--name", action="append", default=[], help="Name segment (repeatable)")
    p.set_defaults(func=cmd_check)

    # prefix
    p = sub.add_parser("prefix", help="Show the name prefix of a semantic ID")
    p.add_argument("id")
    p.set_defaults(func=cmd_prefix)

    # tables
    p = sub.add_parser("tables", help="Dump the alphabet lookup tables as JSON")
    p.set_defaults(func=cmd_tables)

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    if not args.command:
        parser.print_help()
        sys.exit(1)
    try:
        args.func(args)
    except ValueError as e:  # bad hex input or a SemanticIDError
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
