import ipaddress
from tracegeo.models import GeoInfo

GOOGLE = GeoInfo(ip="8.8.8.8", hostname="dns.google", anycast=True, city="Mountain View",
                 region="California", country="US", loc="37.4056,-122.0775",
                 org="AS15169 Google LLC", postal="94043", timezone="America/Los_Angeles")
CLOUDFLARE = GeoInfo(ip="1.1.1.1", hostname="one.one.one.one", anycast=True, city="Brisbane",
                     region="Queensland", country="AU", org="AS13335 Cloudflare, Inc.")


class FakeLookup:
    """lookup_batch stand-in that records every call."""

    def __init__(self, known=None):
        self.known = known if known is not None else {"8.8.8.8": GOOGLE, "1.1.1.1": CLOUDFLARE}
        self.calls = []

    def __call__(self, addresses):
        addresses = list(addresses)
        self.calls.append(addresses)
        return {a: self.known[str(a)] for a in addresses if str(a) in self.known}


def ip(s):
    return ipaddress.ip_address(s)
