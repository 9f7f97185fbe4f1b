# pathsearch/plots/plotting.py
# Bar plots comparing benchmark rows (dicts as written to results.json).
# Nodes expanded, path cost, time taken and peak memory each get a panel.
from __future__ import annotations
import math
from typing import Dict, List, Sequence

import matplotlib.pyplot as plt

_PANELS = (
    ("nodes_expanded", "Nodes Expanded"),
    ("cost", "Path Cost"),
    ("time_s", "Time (s)"),
    ("peak_kb", "Peak Memory (KB)"),
)


def sorted_rows(rows: Sequence[Dict], key: str) -> List[Dict]:
    """Rows ordered by ``key``; rows missing the value go last."""
    def key_fn(r):
        v = r.get(key)
        return math.inf if v is None else v
    return sorted(rows, key=key_fn)


def bar(ax, rows: Sequence[Dict], metric: str, title: str, ylabel: str = "") -> None:
    algos = [r["algo"] for r in rows]
    vals = [r.get(metric) or 0 for r in rows]

    x = list(range(len(algos)))
    ax.bar(x, vals)
    ax.set_title(title)
    if ylabel:
        ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos, rotation=20, ha="right")

    top = max(vals, default=0) or 1
    for xi, v in zip(x, vals):
        if isinstance(v, float) and v < 0.01:
            label = f"{v:.4f}"
        elif isinstance(v, float):
            label = f"{v:.3f}"
        else:
            label = f"{v}"
        ax.text(xi, v + 0.01 * top, label, ha="center", va="bottom", fontsize=8)


def bar_compare(rows: Sequence[Dict], title: str = "Search Comparison"):
    fig, axs = plt.subplots(2, 2, figsize=(11, 8))
    for ax, (metric, label) in zip(axs.ravel(), _PANELS):
        bar(ax, rows, metric, label)
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 1, 0.95])
    return fig
