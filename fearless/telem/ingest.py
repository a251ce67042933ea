"""UDP listener that turns "name value" packets into telemetry events."""

import re
import socket
import threading

from fearless.telem.event import Telemetry, broadcast

_BUFFER_SIZE = 16_250
_U32 = re.compile(r"\+?[0-9]+")
_U32_MAX = 0xFFFF_FFFF


def parse_packet(buf):
    """Parse ``"<name> <u32>"`` into Telemetry, or return None if malformed."""
    fields = buf.split()
    if len(fields) < 2:
        return None
    name, raw = fields[0], fields[1]
    if _U32.fullmatch(raw) is None:
        return None
    value = int(raw)
    if value > _U32_MAX:
        return None
    return Telemetry(name, value)


def handle_udp(chans, sock):
    """Read packets from ``sock`` forever, broadcasting each valid one.

    Socket errors (including timeouts) and undecodable packets propagate.
    """
    while True:
        data, _ = sock.recvfrom(_BUFFER_SIZE)
        telem = parse_packet(data.decode("utf-8"))
        if telem is not None:
            broadcast(chans, telem)


class IngestPoint:
    """Listen on every address ``host:port`` resolves to."""

    def __init__(self, host, port, chans):
        self.host = host
        self.port = port
        self.chans = chans

    def _serve(self, sock, errors):
        try:
            with sock:
                handle_udp(self.chans, sock)
        except Exception as exc:
            errors.append(exc)

    def run(self):
        """Serve until every listener stops; raise the first listener error."""
        try:
            infos = socket.getaddrinfo(self.host, self.port, type=socket.SOCK_DGRAM)
        except socket.gaierror:
            return

        errors = []
        threads = []
        for family, sock_type, proto, _, addr in infos:
            sock = socket.socket(family, sock_type, proto)
            try:
                sock.bind(addr)
            except OSError:
                sock.close()
                raise
            thread = threading.Thread(
                target=self._serve, args=(sock, errors), daemon=True
            )
            thread.start()
            threads.append(thread)

        for thread in threads:
            thread.join()
        if errors:
            raise errors[0]