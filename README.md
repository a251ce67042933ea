# fearless

Small concurrency building blocks and the programs that exercise them.
Everything is pure standard-library Python.

## Modules

- `fearless.hashmap` – `HashMapU8`, a 256-slot table keyed by integers
  0..255 (other keys raise `ValueError`), and `HashMap`, a list of entries
  kept sorted by key hash. `HashMap` tells keys apart by hash alone, so two
  keys with the same hash share one entry. Both have `insert(k, v)`, which
  returns the value replaced or `None`, and `get(k)`, which returns the
  stored value or `None`. `make_hash(hasher, key)` folds a hash to 64 bits.
- `fearless.rng` – `XorShiftRng`, a deterministic 32-bit xorshift generator
  with `next_u32`, `next_u16`, `next_u8` and `next_bool`.
- `fearless.bench` – `workload(hash_map, operations, key_bits)` runs a fixed
  random stream of inserts and lookups and returns a `WorkloadCounts`;
  `insert_and_lookup_naive`, `insert_and_lookup_specialized` and
  `insert_and_lookup_standard` run it on each map with byte keys.
- `fearless.interpreter` – `run_naive(lines)` and `run_specialized(lines)`
  apply `INSERT key value` / `LOOKUP key` lines to a map and return it.
- `fearless.ring` – `Ring`, a fixed-capacity ring of optional slots, with
  `writer`/`reader` threads over it, and `run_ring` / `run_channel` that pass
  an ordered sequence through the ring or a bounded `queue.Queue`, raising
  `RuntimeError` if a value arrives out of order.
- `fearless.synchro.queue` – `Queue`, a FIFO with `enq` and `deq`
  (`deq` returns `None` when empty).
- `fearless.synchro.semaphore` – `Semaphore(capacity)` with `wait`, `signal`
  and use as a context manager.
- `fearless.synchro.swap_mutex` – `SwapMutex(value)`, a spinning lock whose
  `lock()` returns a `SwapMutexGuard` exposing `.value` until `release()` or
  the end of a `with` block.
- `fearless.treiber` – `Stack` with `push` and `pop` (`None` when empty).
- `fearless.bridge` – the one-lane bridge: `Bridge`, `Side`, `step` and
  `run_bridge`.
- `fearless.locks` – `condvar_example`, `rwlock_example` and
  `writer_example`: readers watching a wrapping counter.
- `fearless.rocket` – `Resources`, `producer`, `rocket` and `launch`.
- `fearless.missions` – `Project`, `Mission`, `project_flights`,
  `total_flights`, `flight` and `prefix_by_clock`.
- `fearless.mpmc` – `run_ordering`, two flags set and read across threads.
- `fearless.stack_bench` – `stress` runs push/pop workers and reports
  per-second cycle quantiles through `format_cycles`.
- `fearless.telem` – the telemetry pipeline: `event` (`Telemetry`, `Flush`,
  `broadcast`), `filters` (`HighFilter`, `LowFilter`), `egress` (`CKMS`,
  `CMAEgress`, `CKMSEgress`), `ingest` (`parse_packet`, `IngestPoint`) and
  `cli` (`build_pipeline`).

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from fearless.hashmap import HashMapU8
from fearless.synchro.queue import Queue
from fearless.synchro.semaphore import Semaphore
from fearless.synchro.swap_mutex import SwapMutex
from fearless.treiber import Stack
from fearless.telem.ingest import parse_packet

table = HashMapU8()
assert table.insert(7, "seven") is None
assert table.get(7) == "seven"

q = Queue()
q.enq(1)
q.enq(2)
assert q.deq() == 1

stack = Stack()
stack.push("a")
assert stack.pop() == "a"
assert stack.pop() is None

gate = Semaphore(1)
with gate:
    pass

counter = SwapMutex(0)
with counter.lock() as guard:
    guard.value += 1

telemetry = parse_packet("cpu 42")
assert telemetry.name == "cpu" and telemetry.value == 42
assert parse_packet("cpu lots") is None
```

## Commands

| Command                | What it runs                                              |
|------------------------|-----------------------------------------------------------|
| `fearless-hello`       | the greeting; `--parallel` prints it from a thread        |
| `fearless-missions`    | `flights`, `split-array`, `split-struct` or `slice`       |
| `fearless-bench`       | `naive`, `specialized` or `standard` map; `--operations`  |
| `fearless-interpreter` | `naive` or `specialized`; reads commands from stdin       |
| `fearless-ring`        | `ring` or `channel`; `--capacity`, `--read-limit`         |
| `fearless-bridge`      | bridge transfers; `--rounds`, `--interval`                |
| `fearless-locks`       | `condvar`, `rwlock` or `writer`; `--readers`, `--zeros`, `--modulus` |
| `fearless-rocket`      | rocket names; `--countdown`, `--tick`                     |
| `fearless-mpmc`        | flag ordering; fails if neither reader saw both flags     |
| `fearless-demos`       | `mutex`, `spin-mutex`, `semaphore`, `queue-spin`, `stack-spin`; `--threads`, `--rounds`, `--iterations` |
| `fearless-stack-bench` | stack stress; `--workers`, `--iterations`, `--interval`   |
| `fearless-telem`       | UDP pipeline; `--host`, `--port`, `--limit`, `--error`, `--interval` |

`fearless-telem` listens for UDP packets of the form `name value`, where
`value` is an integer from 0 to 4294967295; other packets are ignored.
Values at most `--limit` go to a quantile summary, values at least `--limit`
to a moving average, and both are printed every `--interval` seconds when new
data has arrived.

## What it does not do

- `Queue` and `Stack` are guarded by a lock; they are not lock-free.
- `fearless-bench` counts outcomes only; it does not time anything.
- `fearless-interpreter` prints nothing: it only applies the commands.
- The telemetry pipeline keeps everything in memory and writes reports to
  standard output; there is no storage and no other output.