# app.py
from flask import Flask, render_template, request, redirect, url_for, flash
import logging, os

from tracegeo.hops import parse_hops
from tracegeo.query import resolve
from tracegeo.render import render_annotated, render_report
from tracegeo.ipinfo import IPInfoClient

app = Flask(__name__)
app.secret_key = os.environ.get("FLASK_SECRET", "dev-secret")
# token -> lookup_batch callable; swapped out in tests
app.config["LOOKUP_FACTORY"] = lambda token: IPInfoClient(token).lookup_batch

log = logging.getLogger(__name__)

VIEWS = [("trace", "Traceroute with location"), ("full", "Full geo data per hop")]


@app.route("/", methods=["GET", "POST"])
def index():
    text = ""; view = "trace"; output = None; hop_count = None
    if request.method == "POST":
        text = request.form.get("input") or ""
        view = request.form.get("view", "trace")
        token = (request.form.get("token") or "").strip() or os.environ.get("IPINFO_TOKEN", "")

        if view not in dict(VIEWS):
            flash("Unknown view selected.", "error")
            return redirect(url_for("index"))
        if not text.strip():
            flash("Paste an IP, a list of IPs or a traceroute.", "error")
            return redirect(url_for("index"))
        if not token:
            flash("Enter an ipinfo.io token (or set IPINFO_TOKEN).", "error")
            return redirect(url_for("index"))

        lines = text.splitlines()
        hops = parse_hops(lines)
        hop_count = len(hops)
        if not hops:
            flash("No IP addresses found in input.", "error")
        else:
            geo = resolve(hops, app.config["LOOKUP_FACTORY"](token))
            if view == "full":
                output = render_report(hops, geo)
            else:
                output = render_annotated(lines, hops, geo)
            log.info("rendered %s view for %d hops", view, hop_count)

    return render_template("index.html", title="Trace to Geo", views=VIEWS,
                           text=text, view=view, output=output, hop_count=hop_count)


if __name__ == "__main__":
    app.run(debug=True)
