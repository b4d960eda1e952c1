# dls_lab/plots/plotting.py
# Bar plots of a depth-limit sweep: nodes expanded per limit, coloured by outcome, and time per limit.
from __future__ import annotations
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.patches import Patch

OUTCOME_COLORS = {
    "solution": "tab:green",
    "cutoff": "tab:orange",
    "failure": "tab:gray",
    "error": "tab:red",
}


def limit_sweep(results, title="Depth-Limited Search"):
    limits = [r.limit for r in results]
    nodes = [r.nodes_expanded for r in results]
    times = [r.time_s or 0.0 for r in results]
    colors = [OUTCOME_COLORS.get(r.outcome, "tab:blue") for r in results]
    x = list(range(len(limits)))

    fig, axs = plt.subplots(1, 2, figsize=(11, 4))
    axs[0].bar(x, nodes, color=colors); axs[0].set_title("Nodes Expanded")
    axs[1].bar(x, times, color=colors); axs[1].set_title("Time (s)")
    for ax in axs:
        ax.set_xticks(x)
        ax.set_xticklabels([str(l) for l in limits])
        ax.set_xlabel("depth limit")

    handles = [Patch(color=c, label=name) for name, c in OUTCOME_COLORS.items()]
    fig.legend(handles=handles, loc="upper right")
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 0.9, 0.95])
    return fig


def save_figure(fig, path, dpi=160):
    fig.savefig(path, format="png", dpi=dpi)
    plt.close(fig)
    return path
