"""Command that wires the UDP ingest point through filters to the egresses."""

import argparse
import threading
import time
from dataclasses import dataclass, field
from queue import Queue

from fearless.telem.egress import CKMSEgress, CMAEgress
from fearless.telem.event import Flush, broadcast
from fearless.telem.filters import HighFilter, LowFilter
from fearless.telem.ingest import IngestPoint


@dataclass
class _Pipeline:
    inputs: list
    threads: list = field(default_factory=list)

    def close(self):
        """Close the inputs and wait for every stage to finish."""
        for chan in self.inputs:
            chan.put(None)
        for thread in self.threads:
            thread.join()


def build_pipeline(limit, error):
    """Start the filter and egress stages and return the running pipeline.

    Values at most ``limit`` go to a quantile summary with the given
    ``error``; values at least ``limit`` go to a moving average.
    """
    low_in, high_in = Queue(), Queue()
    ckms_in, cma_in = Queue(), Queue()
    targets = [
        (LowFilter(limit).run, (low_in, [ckms_in])),
        (HighFilter(limit).run, (high_in, [cma_in])),
        (CKMSEgress(error).run, (ckms_in,)),
        (CMAEgress().run, (cma_in,)),
    ]
    pipeline = _Pipeline(inputs=[low_in, high_in])
    for target, args in targets:
        thread = threading.Thread(target=target, args=args, daemon=True)
        thread.start()
        pipeline.threads.append(thread)
    return pipeline


def main(argv=None):
    parser = argparse.ArgumentParser(description="Summarise UDP telemetry.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=1990)
    parser.add_argument("--limit", type=int, default=100)
    parser.add_argument("--error", type=float, default=0.01)
    parser.add_argument("--interval", type=float, default=1.0)
    args = parser.parse_args(argv)

    pipeline = build_pipeline(args.limit, args.error)
    ingest = IngestPoint(args.host, args.port, pipeline.inputs)
    threading.Thread(target=ingest.run, daemon=True).start()
    try:
        while True:
            broadcast(pipeline.inputs, Flush())
            time.sleep(args.interval)
    except KeyboardInterrupt:
        pipeline.close()
    return 0