# pathsearch/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import io
import json
from pathlib import Path
from typing import Dict, List

import matplotlib.pyplot as plt

from ..plots.plotting import bar, bar_compare, sorted_rows
from .run_all import DEFAULT_OUT


def load_rows(results_json: Path) -> List[Dict]:
    if not results_json.exists():
        raise SystemExit(f"Missing {results_json}. Run: python -m pathsearch.benchmarks.run_all")
    data = json.loads(results_json.read_text())
    # Keep only successful runs
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows


def fmt_table(rows: List[Dict]) -> str:
    # Markdown table
    lines = [
        "| Algorithm | Cost | Path Length | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, float):
            return f"{x:.6f}"
        if isinstance(x, int):
            return f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['algo']} | {fnum(r.get('cost'))} | {fnum(r.get('path_len'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)


def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    plt.close(fig)
    return buf.getvalue()


def main(argv=None) -> List[Path]:
    ap = argparse.ArgumentParser(description="Plot results.json written by run_all.")
    ap.add_argument("--results", type=Path, default=DEFAULT_OUT)
    ap.add_argument("--out-dir", type=Path, default=None, help="defaults to the results directory")
    args = ap.parse_args(argv)
    out_dir = args.out_dir or args.results.parent
    rows = load_rows(args.results)
    written = []

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    written.append(md_path)

    # One chart per metric (sorted for readability) plus the 2x2 overview
    for metric, title, ylabel, fname in (
        ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes", "nodes_expanded.png"),
        ("time_s", "Wall Time (lower is better)", "seconds", "time.png"),
        ("cost", "Path Cost (lower is better)", "cost", "cost.png"),
    ):
        fig, ax = plt.subplots(figsize=(6, 4))
        bar(ax, sorted_rows(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        (out_dir / fname).write_bytes(fig_to_png_bytes(fig))
        written.append(out_dir / fname)

    (out_dir / "overview.png").write_bytes(fig_to_png_bytes(bar_compare(rows)))
    written.append(out_dir / "overview.png")

    for p in written:
        print(f"Wrote {p}")
    return written

if __name__ == "__main__":
    main()
