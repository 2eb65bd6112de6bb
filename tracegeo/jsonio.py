import json

def write_json(path: str, obj):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)

def results_to_json(hops, geo_by_address) -> dict:
    """JSON-ready view of one batch: hops in parse order plus geo keyed by IP string."""
    return {
        "hops": [{"hop": h.index, "ip": str(h.address), "line": h.source_line} for h in hops],
        "geo": {str(a): info.to_dict() for a, info in geo_by_address.items()},
    }
