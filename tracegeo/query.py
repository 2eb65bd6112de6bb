import logging
from .classify import is_private
from .models import GeoInfo

log = logging.getLogger(__name__)


def public_addresses(hops) -> list:
    """Unique public addresses in first-seen order."""
    seen = set(); out = []
    for h in hops:
        if h.address in seen or is_private(h.address):
            continue
        seen.add(h.address)
        out.append(h.address)
    return out


def resolve(hops, lookup_batch) -> dict:
    """
    Build the address -> GeoInfo map used by the renderers.

    lookup_batch is called once with the public addresses only (not at all if
    there are none). Private hops get the GeoInfo.private placeholder.
    Addresses the lookup omits stay absent.
    """
    geo = {}
    for h in hops:
        if is_private(h.address):
            geo[h.address] = GeoInfo.private(h.address)

    targets = public_addresses(hops)
    if targets:
        try:
            found = lookup_batch(targets) or {}
        except Exception as e:
            log.warning("lookup failed for %d addresses: %s", len(targets), e)
            found = {}
        for addr in targets:
            info = found.get(addr) or found.get(str(addr))
            if info is not None:
                geo[addr] = info
    log.info("resolved %d of %d public addresses", sum(a in geo for a in targets), len(targets))
    return geo
