# tracegeo/models.py
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class GeoInfo:
    ip: str
    hostname: str = ""
    anycast: bool = False
    city: str = ""
    region: str = ""
    country: str = ""       # ISO code as reported by ipinfo.io, e.g. "US"
    loc: str = ""           # "lat,lon"
    org: str = ""           # "AS15169 Google LLC"
    postal: str = ""
    timezone: str = ""

    @classmethod
    def from_json(cls, j: dict) -> "GeoInfo":
        """Build from an ipinfo.io JSON object; missing keys become empty."""
        return cls(
            ip=str(j.get("ip") or ""),
            hostname=j.get("hostname") or "",
            anycast=bool(j.get("anycast", False)),
            city=j.get("city") or "",
            region=j.get("region") or "",
            country=j.get("country") or "",
            loc=j.get("loc") or "",
            org=j.get("org") or "",
            postal=j.get("postal") or "",
            timezone=j.get("timezone") or "",
        )

    @classmethod
    def private(cls, ip) -> "GeoInfo":
        """Placeholder used for RFC1918/ULA hops instead of querying."""
        return cls(ip=str(ip), city="Local")

    def to_dict(self) -> dict:
        return asdict(self)
