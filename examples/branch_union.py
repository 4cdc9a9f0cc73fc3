"""Collapse differently-shaped branch results into one nested Either value."""
from union_tree import emit_type, unwrap, wrap

COUNT = 3


def load(source: str):
    if source == "cache":
        return wrap(COUNT, 0, {"hit": True})
    if source == "disk":
        return wrap(COUNT, 1, b"raw-bytes")
    return wrap(COUNT, 2, ["remote", "rows"])


if __name__ == "__main__":
    print("collapsed type:", emit_type(COUNT, "python", ["dict", "bytes", "list"]))
    for source in ("cache", "disk", "network"):
        value = load(source)
        n, payload = unwrap(COUNT, value)
        print(f"{source:8} -> {value!r} (alternative {n}: {payload!r})")
