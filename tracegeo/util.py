import datetime, pathlib, sys

def ensure_out(path: str = "out"):
    pathlib.Path(path).mkdir(parents=True, exist_ok=True)

def timestamp():
    return datetime.datetime.now().strftime("%Y%m%d_%H%M%S")

def write(path: str, text: str):
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)

def read_lines(path: str | None = None) -> list[str]:
    """Lines of a file, or of stdin until EOF, without trailing newlines."""
    if path:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            text = f.read()
    else:
        text = sys.stdin.read()
    return text.splitlines()
