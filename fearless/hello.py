"""Greeting printed directly or from a spawned thread."""

import argparse
import threading

_GREETING = "GREETINGS, HUMANS"


def greeting():
    """Return the greeting text."""
    return _GREETING


def parallel_greeting():
    """Print the greeting from a separate thread, wait for it, and return the text."""
    errors = []

    def speak():
        try:
            print(_GREETING)
        except Exception as exc:
            errors.append(exc)

    thread = threading.Thread(target=speak)
    thread.start()
    thread.join()
    if errors:
        raise errors[0]
    return _GREETING


def main(argv=None):
    parser = argparse.ArgumentParser(description="Print a greeting.")
    parser.add_argument("--parallel", action="store_true")
    args = parser.parse_args(argv)
    if args.parallel:
        parallel_greeting()
    else:
        print(greeting())
    return 0