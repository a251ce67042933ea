"""Two writers and two readers observing a pair of flags."""

import argparse
import threading


def run_ordering():
    """Set two flags from two threads while two others read them in opposite order.

    Returns how many readers saw the other flag already set; under
    sequentially consistent ordering at least one must.
    """
    x = threading.Event()
    y = threading.Event()
    z = 0
    z_lock = threading.Lock()

    def bump():
        nonlocal z
        with z_lock:
            z += 1

    def read_then(first, second):
        first.wait()
        if second.is_set():
            bump()

    threads = [
        threading.Thread(target=x.set),
        threading.Thread(target=y.set),
        threading.Thread(target=read_then, args=(x, y)),
        threading.Thread(target=read_then, args=(y, x)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return z


def main(argv=None):
    parser = argparse.ArgumentParser(description="Check flag ordering across threads.")
    parser.parse_args(argv)
    if run_ordering() == 0:
        raise RuntimeError("neither reader saw both flags set")
    return 0