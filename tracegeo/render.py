from .hops import hop_index

SEPARATOR = "    # "
UNRESOLVED = "Private IP - Local"
RULE = "-" * 63
REPORT_FIELDS = [
    ("Hostname", "hostname"),
    ("Anycast", "anycast"),
    ("City", "city"),
    ("Region", "region"),
    ("Country", "country"),
    ("Location", "loc"),
    ("Organization", "org"),
    ("Postal", "postal"),
    ("Timezone", "timezone"),
]


def _pick(records, idx):
    for r in records:
        if r.index == idx:
            return r
    return records[0]


def render_annotated(lines, hops, geo_by_address) -> list[str]:
    """
    Reproduce the input with "# <city> - <country>" appended to every line
    that produced a hop, annotations aligned one column past the longest line.
    Lines without a hop come back untouched.
    """
    longest = max((len(l) for l in lines), default=0)
    by_line = {}
    for h in hops:
        by_line.setdefault(h.source_line, []).append(h)

    out = []
    for i, line in enumerate(lines):
        records = by_line.get(i)
        if not records:
            out.append(line)
            continue
        hop = _pick(records, hop_index(line, i))
        info = geo_by_address.get(hop.address)
        note = f"{info.city} - {info.country}" if info is not None else UNRESOLVED
        out.append(line + " " * (longest - len(line)) + SEPARATOR + note)
    return out


def _field(info, attr):
    v = getattr(info, attr)
    if isinstance(v, bool):
        return "true" if v else "false"
    return v


def render_report(hops, geo_by_address) -> list[str]:
    """Every field for every hop, ascending hop index; '-' where nothing resolved."""
    out = []
    for h in sorted(hops, key=lambda r: r.index):
        info = geo_by_address.get(h.address)
        out.append(RULE)
        out.append(f"Hop {h.index} IP: {h.address}")
        out.append(RULE)
        for label, attr in REPORT_FIELDS:
            out.append(f"{label}: {_field(info, attr) if info is not None else '-'}")
        out.append("")
    return out
