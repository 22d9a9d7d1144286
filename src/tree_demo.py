"""
Ordered Tree Demo: textbook driver checks, structural comparisons, and plots.

Generates:
- viz/*.png: individual visualization files
- report.pdf: PDF report collecting every figure
"""

import logging
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from logger_config import configure_from_settings
from ordered_tree import OrderedTree
from tree_errors import EmptyTreeError
from tree_settings import TreeSettings

SEED = 42
NUMS = 4000
GAP = 37
CHAIN = (5, 10, 25, 50, 75, 100)
SMALL = (50, 30, 70, 20, 40, 65, 80, 35)

OUTPUT_DIR = Path.cwd()
VIZ_DIR = OUTPUT_DIR / "viz"
REPORT_PATH = OUTPUT_DIR / "report.pdf"

COLORS = {
    "original": "#3498db",
    "copy": "#27ae60",
    "mirror": "#e67e22",
    "chain": "#e74c3c",
    "edge": "#7f8c8d",
}

logger = logging.getLogger(__name__)


def build(values, settings):
    tree = OrderedTree(settings)
    for value in values:
        tree.insert(value)
    return tree


def node_positions(tree):
    """Return (x, y, labels, edges) with x the in-order rank and y the negated depth."""
    xs, ys, labels, edges = [], [], [], []
    index = {}
    stack = []
    node, depth = tree._root, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        index[id(node)] = len(xs)
        xs.append(len(xs))
        ys.append(-depth)
        labels.append(str(node.value))
        node, depth = node.right, depth + 1

    pending = [tree._root] if tree._root is not None else []
    while pending:
        node = pending.pop()
        for child in (node.left, node.right):
            if child is not None:
                edges.append((index[id(node)], index[id(child)]))
                pending.append(child)
    return np.array(xs, dtype=float), np.array(ys, dtype=float), labels, edges


def draw_tree(ax, tree, color, title):
    xs, ys, labels, edges = node_positions(tree)
    for parent, child in edges:
        ax.plot([xs[parent], xs[child]], [ys[parent], ys[child]],
                color=COLORS["edge"], linewidth=1.2, zorder=1)
    ax.scatter(xs, ys, s=650, color=color, edgecolors="white", linewidths=1.5, zorder=2)
    for x, y, label in zip(xs, ys, labels):
        ax.text(x, y, label, ha="center", va="center", fontsize=9,
                color="white", fontweight="bold", zorder=3)
    ax.set_title(title, fontsize=13, fontweight="bold")
    ax.axis("off")
    if len(xs):
        ax.set_xlim(xs.min() - 0.8, xs.max() + 0.8)
        ax.set_ylim(ys.min() - 0.8, 0.8)


def example_1_textbook_driver(settings):
    """Insert with a gap of 37, remove the odd values, and verify what is left."""
    print("=" * 60)
    print("Example 1: Textbook Driver (gap insert, odd removal)")
    print("=" * 60)

    tree = OrderedTree(settings)
    i = GAP
    while i != 0:
        tree.insert(i)
        i = (i + GAP) % NUMS
    print(f"  Inserted {tree.node_count()} values, height {tree.height()}")

    for i in range(1, NUMS, 2):
        tree.remove(i)

    failures = []
    if tree.find_min() != 2 or tree.find_max() != NUMS - 2:
        failures.append("find_min/find_max")
    if not all(tree.contains(i) for i in range(2, NUMS, 2)):
        failures.append("missing even value")
    if any(tree.contains(i) for i in range(1, NUMS, 2)):
        failures.append("odd value still present")
    status = "PASS" if not failures else "FAIL: " + ", ".join(failures)
    print(f"  After removing odds: size={tree.node_count()}, min={tree.find_min()}, "
          f"max={tree.find_max()}  [{status}]")

    levels = tree.leveled_traversal()
    depths = np.array([depth for depth, _ in levels])
    sizes = np.array([len(level) for _, level in levels])
    capacity = np.power(2.0, depths)

    fig, ax = plt.subplots(figsize=(12, 6))
    ax.bar(depths, sizes, color=COLORS["original"], alpha=0.85, label="nodes at depth")
    ax.plot(depths, np.minimum(capacity, sizes.max() * 1.5), color=COLORS["chain"],
            linestyle="--", linewidth=1.8, label="perfect tree capacity (clipped)")
    ax.set_xlabel("depth")
    ax.set_ylabel("nodes")
    ax.set_title(f"Level profile after odd removal ({tree.node_count()} nodes, "
                 f"height {tree.height()})", fontsize=13, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    path = VIZ_DIR / "01_gap_tree_levels.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print(f"  Fullest level: depth {int(depths[sizes.argmax()])} with {int(sizes.max())} nodes")
    print()
    return tree, [path]


def example_2_counts_and_comparison(settings, gap_tree):
    """Compare the gap tree with a right-skewed chain."""
    print("=" * 60)
    print("Example 2: Node Counts, Fullness, Structure and Equality")
    print("=" * 60)

    chain = build(CHAIN, settings)
    print(f"  Nodes in first tree:  {gap_tree.node_count()}")
    print(f"  Nodes in second tree: {chain.node_count()}")
    print(f"  Second tree level order: {chain.breadth_first_traversal()}")
    print(f"  First tree is full:  {gap_tree.is_full()}")
    print(f"  Second tree is full: {chain.is_full()}")
    print(f"  Same structure: {gap_tree.compare_structure(chain)}")
    print(f"  Equal:          {gap_tree.structural_equals(chain)}")

    fig, ax = plt.subplots(figsize=(9, 7))
    draw_tree(ax, chain, COLORS["chain"], f"Chain {list(CHAIN)}: height {chain.height()}")
    fig.tight_layout()
    path = VIZ_DIR / "02_chain.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print()
    return [path]


def example_3_copy_and_mirror(settings):
    """Copy and mirror a small tree and check the structural laws."""
    print("=" * 60)
    print("Example 3: Copy and Mirror")
    print("=" * 60)

    tree = build(SMALL, settings)
    clone = tree.copy()
    reflected = tree.mirror()

    print(f"  Original level order: {tree.breadth_first_traversal()}")
    print(f"  Copy level order:     {clone.breadth_first_traversal()}")
    print(f"  Copy same structure: {tree.compare_structure(clone)}, "
          f"equal: {tree.structural_equals(clone)}")
    clone.insert(10)
    print(f"  After inserting 10 into the copy: original size={tree.node_count()}, "
          f"copy size={clone.node_count()}")
    print(f"  Mirror level order:   {reflected.breadth_first_traversal()}")
    print(f"  Is mirror: {tree.is_mirror(reflected)}, "
          f"double mirror equal: {reflected.mirror().structural_equals(tree)}")
    print("  Levels:")
    for line in tree.format_levels().splitlines():
        print(f"    {line}")

    fig, axes = plt.subplots(1, 3, figsize=(18, 6))
    draw_tree(axes[0], tree, COLORS["original"], "Original")
    draw_tree(axes[1], clone, COLORS["copy"], "Copy (+10 inserted)")
    draw_tree(axes[2], reflected, COLORS["mirror"], "Mirror")
    fig.suptitle("Copy and Mirror", fontsize=16, fontweight="bold", y=0.98)
    fig.tight_layout(rect=[0, 0, 1, 0.95])
    path = VIZ_DIR / "03_copy_and_mirror.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print()
    return [path]


def example_4_height_growth():
    """Height against size for sorted and shuffled insertion order."""
    print("=" * 60)
    print("Example 4: Height Growth (sorted vs shuffled input)")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    sizes = np.arange(50, 1001, 50)
    settings = TreeSettings(iterative=True)
    sorted_heights = []
    shuffled_heights = []
    for n in sizes:
        sorted_heights.append(build(range(int(n)), settings).height())
        shuffled_heights.append(build(rng.permutation(int(n)).tolist(), settings).height())
    sorted_heights = np.array(sorted_heights)
    shuffled_heights = np.array(shuffled_heights)

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(sizes, sorted_heights, color=COLORS["chain"], linewidth=2, label="sorted input")
    ax.plot(sizes, shuffled_heights, color=COLORS["original"], linewidth=2, label="shuffled input")
    ax.plot(sizes, np.log2(sizes), color=COLORS["edge"], linestyle="--", label="log2(n)")
    ax.set_xlabel("nodes")
    ax.set_ylabel("height")
    ax.set_yscale("log")
    ax.set_title("Unbalanced tree height", fontsize=13, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    path = VIZ_DIR / "04_height_growth.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    print(f"  n={int(sizes[-1])}: sorted height={int(sorted_heights[-1])}, "
          f"shuffled height={int(shuffled_heights[-1])}")
    print()
    return [path]


def example_bonus_empty_tree(settings):
    """Every query on an empty tree is defined; only find_min/find_max raise."""
    print("=" * 60)
    print("Bonus: Empty Tree Behaviour")
    print("=" * 60)

    empty = OrderedTree(settings)
    print(f"  is_empty={empty.is_empty()}, node_count={empty.node_count()}, "
          f"is_full={empty.is_full()}, height={empty.height()}")
    print(f"  in_order={empty.in_order_traversal()}, "
          f"breadth_first={empty.breadth_first_traversal()}")
    print(f"  print_tree: {empty.print_tree()}")
    for operation in (empty.find_min, empty.find_max):
        try:
            operation()
        except EmptyTreeError as e:
            print(f"  {operation.__name__}: EmptyTreeError({e})")
    print()


def generate_pdf_report(all_figures):
    """Collect the saved figures into a single PDF."""
    print("=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    with PdfPages(REPORT_PATH) as pdf:
        fig, ax = plt.subplots(figsize=(10, 7))
        ax.axis("off")
        ax.text(0.5, 0.7, "Ordered Tree", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.55, "Unbalanced binary search tree demo",
                fontsize=16, ha="center", va="center", transform=ax.transAxes,
                color="gray")
        ax.text(0.5, 0.40, "insert | remove | copy | mirror | level order",
                fontsize=13, ha="center", va="center", transform=ax.transAxes,
                color="#555555")
        ax.text(0.5, 0.25, f"Seed: {SEED}  |  gap {GAP}, {NUMS - 1} values",
                fontsize=11, ha="center", va="center", transform=ax.transAxes,
                color="#888888")
        fig.tight_layout()
        pdf.savefig(fig)
        plt.close(fig)

        titles = [
            "Example 1: Level Profile After Odd Removal",
            "Example 2: Right-Skewed Chain",
            "Example 3: Copy and Mirror",
            "Example 4: Height Growth",
        ]

        for fig_path, title in zip(all_figures, titles):
            if fig_path.exists():
                img = plt.imread(str(fig_path))
                fig, ax = plt.subplots(figsize=(11, 8))
                ax.imshow(img)
                ax.axis("off")
                ax.set_title(title, fontsize=14, fontweight="bold", pad=10)
                fig.tight_layout()
                pdf.savefig(fig)
                plt.close(fig)

    print(f"  Report saved to: {REPORT_PATH}")
    print()


def main():
    settings = TreeSettings.from_env()
    configure_from_settings(settings)
    VIZ_DIR.mkdir(parents=True, exist_ok=True)
    logger.info("running demo with settings %s", settings.to_dict())

    print()
    print("*" * 60)
    print("  ORDERED TREE DEMO")
    print(f"  Mode: {'iterative' if settings.iterative else 'recursive'}")
    print("*" * 60)
    print()

    all_figures = []

    gap_tree, figures = example_1_textbook_driver(settings)
    all_figures.extend(figures)
    all_figures.extend(example_2_counts_and_comparison(settings, gap_tree))
    all_figures.extend(example_3_copy_and_mirror(settings))
    all_figures.extend(example_4_height_growth())
    example_bonus_empty_tree(settings)

    generate_pdf_report(all_figures)

    print("=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"  Visualizations: {VIZ_DIR}/")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"    - {f.name}")
    print(f"  PDF Report:     {REPORT_PATH}")
    print()


if __name__ == "__main__":
    main()
