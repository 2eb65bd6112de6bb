import logging, os
import cachetools
import requests
from .models import GeoInfo

log = logging.getLogger(__name__)

IPINFO_BASE_URL = os.environ.get("IPINFO_BASE_URL", "https://ipinfo.io")
DEFAULT_TIMEOUT = float(os.environ.get("IPINFO_TIMEOUT", "6.0"))
DEFAULT_CACHE_TTL = int(os.environ.get("IPINFO_CACHE_TTL", "86400"))
DEFAULT_CACHE_SIZE = int(os.environ.get("IPINFO_CACHE_SIZE", "4096"))
BATCH_LIMIT = 1000  # ipinfo.io /batch accepts up to 1000 entries per request


class IPInfoClient:
    """
    Thin ipinfo.io client. Failures are logged and reported as missing
    results, never raised.
    """

    def __init__(self, token: str, base_url: str = IPINFO_BASE_URL,
                 timeout: float = DEFAULT_TIMEOUT, cache_ttl: int = DEFAULT_CACHE_TTL,
                 cache_size: int = DEFAULT_CACHE_SIZE,
                 session: requests.Session | None = None):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.cache_ttl = cache_ttl
        self.session = session or requests.Session()
        # ip str -> GeoInfo; cache_ttl <= 0 disables caching
        self._cache = cachetools.TTLCache(maxsize=cache_size, ttl=cache_ttl) if cache_ttl > 0 else None

    # ---------- cache ----------

    def _cached(self, ip: str):
        if self._cache is None:
            return None
        return self._cache.get(ip)

    def _store(self, ip: str, info: GeoInfo):
        if self._cache is not None:
            self._cache[ip] = info

    # ---------- single ----------

    def lookup(self, ip) -> GeoInfo | None:
        """GET /<ip>; returns None on HTTP/network/JSON errors and bogons."""
        key = str(ip)
        hit = self._cached(key)
        if hit is not None:
            return hit
        try:
            r = self.session.get(f"{self.base_url}/{key}", params={"token": self.token},
                                 timeout=self.timeout)
            r.raise_for_status()
            j = r.json()
        except requests.RequestException as e:
            log.warning("IP query failed for %s: %s", key, e)
            return None
        except ValueError:
            log.warning("IP query for %s returned invalid JSON", key)
            return None
        info = _to_geo(j)
        if info is None:
            log.info("no geo data for %s", key)
            return None
        self._store(key, info)
        return info

    # ---------- batch ----------

    def _post_batch(self, chunk: list[str]) -> dict:
        r = self.session.post(f"{self.base_url}/batch", params={"token": self.token},
                              json=chunk, timeout=self.timeout)
        r.raise_for_status()
        j = r.json()
        if not isinstance(j, dict):
            raise ValueError("unexpected batch response")
        return j

    def lookup_batch(self, addresses) -> dict:
        """
        Resolve many addresses, keyed by the objects passed in.
        Uses /batch in chunks and falls back to single lookups if it fails.
        """
        addresses = list(addresses)
        results = {}
        pending = []
        for a in addresses:
            hit = self._cached(str(a))
            if hit is not None:
                results[a] = hit
            else:
                pending.append(a)

        for start in range(0, len(pending), BATCH_LIMIT):
            chunk = pending[start:start + BATCH_LIMIT]
            try:
                j = self._post_batch([str(a) for a in chunk])
            except (requests.RequestException, ValueError) as e:
                log.warning("batch query failed (%s); falling back to single lookups", e)
                results.update(self.lookup_single(chunk))
                continue
            for a in chunk:
                info = _to_geo(j.get(str(a)))
                if info is None:
                    log.info("no geo data for %s", a)
                    continue
                self._store(str(a), info)
                results[a] = info

        log.debug("lookup_batch: %d requested, %d resolved", len(addresses), len(results))
        return results

    def lookup_single(self, addresses) -> dict:
        """Same contract as lookup_batch, one request per address."""
        results = {}
        for a in addresses:
            info = self.lookup(a)
            if info is not None:
                results[a] = info
        return results


def _to_geo(j) -> GeoInfo | None:
    if not isinstance(j, dict) or j.get("bogon") or "error" in j:
        return None
    return GeoInfo.from_json(j)
