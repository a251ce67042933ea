"""Line-oriented INSERT/LOOKUP command interpreters over the simple maps."""

import argparse
import re
import sys

from fearless.hashmap import HashMap, HashMapU8

_U8 = re.compile(r"\+?[0-9]+")


def _parse_u8(text):
    if _U8.fullmatch(text) is None:
        return None
    value = int(text)
    return value if value <= 255 else None


def _strip_eol(line):
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def run_naive(lines):
    """Apply commands to a string-keyed map and return the map."""
    hash_map = HashMap()
    for line in lines:
        cmd, *args = _strip_eol(line).split(" ")
        if cmd == "LOOKUP" and args:
            hash_map.get(args[0])
        elif cmd == "INSERT" and len(args) >= 2:
            hash_map.insert(args[0], args[1])
    return hash_map


def run_specialized(lines):
    """Apply commands to a byte-keyed map and return the map.

    Commands whose key is not an integer in 0..255 are ignored.
    """
    hash_map = HashMapU8()
    for line in lines:
        cmd, *args = _strip_eol(line).split(" ")
        if cmd not in ("LOOKUP", "INSERT") or not args:
            continue
        key = _parse_u8(args[0])
        if key is None:
            continue
        if cmd == "LOOKUP":
            hash_map.get(key)
        elif len(args) >= 2:
            hash_map.insert(key, args[1])
    return hash_map


def main(argv=None):
    parser = argparse.ArgumentParser(description="Read map commands from stdin.")
    parser.add_argument(
        "map", nargs="?", choices=("naive", "specialized"), default="naive"
    )
    args = parser.parse_args(argv)
    runner = run_naive if args.map == "naive" else run_specialized
    runner(sys.stdin)
    return 0