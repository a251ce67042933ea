import queue
import socket
import threading

import pytest

from fearless.telem.event import Telemetry
from fearless.telem.ingest import IngestPoint, handle_udp, parse_packet


def _drain(chan):
    items = []
    while not chan.empty():
        items.append(chan.get_nowait())
    return items


def test_parse_simple_packet():
    assert parse_packet("cpu 42") == Telemetry("cpu", 42)


def test_parse_ignores_extra_whitespace_and_fields():
    assert parse_packet("  cpu \t 7  extra") == Telemetry("cpu", 7)


def test_parse_accepts_plus_sign_and_u32_max():
    assert parse_packet("cpu +5") == Telemetry("cpu", 5)
    assert parse_packet("cpu 4294967295") == Telemetry("cpu", 4294967295)


@pytest.mark.parametrize(
    "packet", ["", "cpu", "cpu abc", "cpu -1", "cpu 4294967296", "cpu +", "cpu 1.5"]
)
def test_parse_rejects_malformed(packet):
    assert parse_packet(packet) is None


def test_handle_udp_broadcasts_valid_packets():
    chan = queue.Queue()
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as recv, socket.socket(
        socket.AF_INET, socket.SOCK_DGRAM
    ) as send:
        recv.bind(("127.0.0.1", 0))
        recv.settimeout(0.5)
        addr = recv.getsockname()
        for packet in (b"cpu 42", b"garbage", b"mem 7"):
            send.sendto(packet, addr)
        with pytest.raises(TimeoutError):
            handle_udp([chan], recv)
    assert _drain(chan) == [Telemetry("cpu", 42), Telemetry("mem", 7)]


def test_handle_udp_rejects_invalid_utf8():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as recv, socket.socket(
        socket.AF_INET, socket.SOCK_DGRAM
    ) as send:
        recv.bind(("127.0.0.1", 0))
        recv.settimeout(2.0)
        send.sendto(b"\xff\xfe 1", recv.getsockname())
        with pytest.raises(UnicodeDecodeError):
            handle_udp([queue.Queue()], recv)


def test_run_fails_when_port_is_taken():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as held:
        held.bind(("127.0.0.1", 0))
        port = held.getsockname()[1]
        with pytest.raises(OSError):
            IngestPoint("127.0.0.1", port, []).run()


def test_run_receives_packets():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
    chan = queue.Queue()
    point = IngestPoint("127.0.0.1", port, [chan])
    threading.Thread(target=point.run, daemon=True).start()

    received = None
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as send:
        for _ in range(50):
            send.sendto(b"net 3", ("127.0.0.1", port))
            try:
                received = chan.get(timeout=0.1)
                break
            except queue.Empty:
                continue
    assert received == Telemetry("net", 3)