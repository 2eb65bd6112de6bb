import ipaddress, re
from dataclasses import dataclass

# "  3  10.0.0.1 ..." -> explicit hop 3
_HOP_INDEX = re.compile(r"^\s*(\d{1,9})\s")
# "host (1.2.3.4)" and "[2001:db8::1]"; nothing else is unwrapped
_WRAPPERS = ("()", "[]")


@dataclass(frozen=True)
class HopRecord:
    index: int
    address: ipaddress.IPv4Address | ipaddress.IPv6Address
    source_line: int


def hop_index(line: str, position: int) -> int:
    """Explicit leading hop number if present, else the 1-based line position."""
    m = _HOP_INDEX.match(line)
    if m:
        return int(m.group(1))
    return position + 1


def parse_address(token: str):
    """Strict IPv4/IPv6 literal parse; returns None for anything else."""
    tok = token
    for opening, closing in _WRAPPERS:
        if len(tok) > 2 and tok[0] == opening and tok[-1] == closing:
            tok = tok[1:-1]
            break
    try:
        return ipaddress.ip_address(tok)
    except ValueError:
        return None


def parse_hops(lines) -> list[HopRecord]:
    """
    Turn raw input lines (single IP, list of IPs or a traceroute transcript)
    into hop records, in line order then token order.
    Never raises; lines without an address just produce nothing.
    """
    hops = []
    for i, line in enumerate(lines):
        idx = hop_index(line, i)
        for tok in line.split():
            addr = parse_address(tok)
            if addr is not None:
                hops.append(HopRecord(index=idx, address=addr, source_line=i))
    return hops
