from .hops import parse_hops
from .query import resolve
from .render import render_annotated, render_report

TOKEN_LEN = 14  # ipinfo.io access tokens

BANNER = """
---------------------------------------------------------------
Trace to Geo - based on ipinfo.io

Enter an IP, a list of IPs or a traceroute. The program then
shows the geolocation data for each IP.
---------------------------------------------------------------
"""

CHOICES = [
    ("1", "enter a new IP(s) or traceroute"),
    ("2", "Show full geo location data for each IP"),
    ("3", "Show initial traceroute with country appended"),
    ("9", "Exit program"),
]


def ask(prompt, default=None, validate=None):
    while True:
        s = input(f"{prompt}" + (f" [{default}]" if default is not None else "") + ": ").strip()
        if not s and default is not None:
            s = default
        if validate:
            ok, msg = validate(s)
            if ok: return s
            print(f"  -> {msg}")
        else:
            return s


def _token_ok(s):
    if not s:
        return False, "No token entered, try again.."
    if len(s) != TOKEN_LEN:
        return False, "Invalid token length, try again.."
    return True, ""


def prompt_token() -> str:
    return ask("Enter ipinfo.io token", validate=_token_ok)


def read_block() -> list[str]:
    """Lines typed by the user up to an empty line or EOF (Ctrl+D / Ctrl+Z)."""
    print("Enter the IP(s) or traceroute, finish with an empty line or Ctrl+D.")
    lines = []
    while True:
        try:
            line = input()
        except EOFError:
            break
        if not line.strip():
            if lines: break
            continue
        lines.append(line)
    return lines


def show_choices():
    print("\nSelect display option")
    for key, desc in CHOICES:
        print(f'Enter "{key}" for: {desc}')


def run_interactive(lookup_batch):
    """Menu loop; each new input replaces the previous lines/hops/results."""
    print(BANNER)
    choice = "1"
    lines, hops, geo = [], [], {}
    while True:
        if choice == "1":
            lines = read_block()
            if lines:
                hops = parse_hops(lines)
                geo = resolve(hops, lookup_batch)
                if not hops:
                    print("No IP addresses found in input.")
            else:
                hops, geo = [], {}
                print("No input detected, please try again")
        elif choice == "2":
            print("\n".join(render_report(hops, geo)))
        elif choice == "3":
            print("\n".join(render_annotated(lines, hops, geo)))
        elif choice == "9":
            print("Good bye!")
            return
        show_choices()
        try:
            choice = input("> ").strip()
        except EOFError:
            print("Good bye!")
            return
