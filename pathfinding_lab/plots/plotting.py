# pathfinding_lab/plots/plotting.py
# Bar plots comparing finished searches on the analytics fields: nodes explored, path length,
# time taken and iterations/generations. Returns the figure; saving or showing it is up to the caller.
from __future__ import annotations
import matplotlib.pyplot as plt

def bar_compare(results, title="Pathfinding Comparison"):
    names = [r.algo for r in results]
    nodes = [r.nodes_explored for r in results]
    lengths = [r.path_length for r in results]
    times = [r.time_s * 1000 for r in results]
    iters = [r.iterations for r in results]
    colors = ["tab:green" if r.success else "tab:red" for r in results]

    fig, axs = plt.subplots(2, 2, figsize=(11,8))
    axs = axs.ravel()
    axs[0].bar(names, nodes, color=colors); axs[0].set_title("Nodes Explored"); axs[0].tick_params(axis='x', rotation=45)
    axs[1].bar(names, lengths, color=colors); axs[1].set_title("Path Length"); axs[1].tick_params(axis='x', rotation=45)
    axs[2].bar(names, times, color=colors); axs[2].set_title("Time (ms)"); axs[2].tick_params(axis='x', rotation=45)
    axs[3].bar(names, iters, color=colors); axs[3].set_title("Iterations / Generations"); axs[3].tick_params(axis='x', rotation=45)
    fig.suptitle(title)
    fig.tight_layout(rect=[0,0,1,0.95])
    return fig
