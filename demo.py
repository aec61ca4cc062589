"""
HashMap Demo -- Contract scenarios, growth trace, chain distribution, and
collision behaviour of the separate-chaining HashMap.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Summary PDF report
"""

import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from hash_map import (
    HashMap,
    DuplicateKeyError,
    KeyNotFoundError,
    NullKeyError,
    LOAD_FACTOR_THRESHOLD,
)
from hash_map_stats import (
    chain_length_histogram,
    chain_lengths,
    growth_trace,
    occupancy_summary,
)

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}


# ---------------------------------------------------------------------------
# Example 1: Contract Scenarios
# ---------------------------------------------------------------------------
def example_1_contract():
    """Walk through put/get/remove and the three error kinds."""
    print("=" * 60)
    print("Example 1: Contract Scenarios")
    print("=" * 60)

    m = HashMap()
    for k in (1, 3, 5, 7, 9):
        m.put(k, k + 1)
    print(f"\n  Inserted keys 1,3,5,7,9 -> size={m.size()}, capacity={m.capacity()}")
    print(f"  get(7) = {m.get(7)}")
    print(f"  remove(3) = {m.remove(3)} -> size={m.size()}, capacity={m.capacity()}")

    for label, action in [
        ("put(None, 1)", lambda: m.put(None, 1)),
        ("put(1, 99)", lambda: m.put(1, 99)),
        ("get(3)", lambda: m.get(3)),
        ("remove(42)", lambda: m.remove(42)),
    ]:
        try:
            action()
            print(f"  {label}: no error")
        except (NullKeyError, DuplicateKeyError, KeyNotFoundError) as exc:
            print(f"  {label}: {type(exc).__name__}")

    assert m.get(1) == 2, "duplicate put must not overwrite"


# ---------------------------------------------------------------------------
# Example 2: Growth Trace
# ---------------------------------------------------------------------------
def example_2_growth_trace():
    """Track size, capacity and load factor across 1000 insertions."""
    print("\n" + "=" * 60)
    print("Example 2: Growth Trace")
    print("=" * 60)

    n = 1000
    trace = growth_trace(range(n))
    steps = np.arange(1, n + 1)

    print(f"\n  Inserted {n} keys starting from capacity 32")
    print(f"  Final capacity: {trace['capacity'][-1]}")
    print(f"  Rehashes at insertion #: {(trace['rehash_points'] + 1).tolist()}")
    print(f"  Max load factor after any put: {trace['load_factor'].max():.4f}")
    assert trace["load_factor"].max() < LOAD_FACTOR_THRESHOLD

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))

    axes[0].step(steps, trace["capacity"], where="post", color=COLORS["blue"], label="capacity")
    axes[0].plot(steps, trace["size"], color=COLORS["green"], label="size")
    for p in trace["rehash_points"]:
        axes[0].axvline(p + 1, color=COLORS["red"], alpha=0.3, linestyle="--")
    axes[0].set_xlabel("Insertions")
    axes[0].set_ylabel("Count")
    axes[0].set_yscale("log", base=2)
    axes[0].set_title("Size vs Capacity\nCapacity doubles at each dashed line",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(steps, trace["load_factor"], color=COLORS["purple"])
    axes[1].axhline(LOAD_FACTOR_THRESHOLD, color=COLORS["red"], linestyle="--",
                    label=f"threshold {LOAD_FACTOR_THRESHOLD}")
    axes[1].set_xlabel("Insertions")
    axes[1].set_ylabel("size / capacity")
    axes[1].set_title("Load Factor Sawtooth\nDrops to ~0.375 after each rehash",
                      fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "01_growth_trace.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_growth_trace.png")


# ---------------------------------------------------------------------------
# Example 3: Chain Length Distribution
# ---------------------------------------------------------------------------
def example_3_chain_distribution():
    """Compare chain lengths for random string keys against sequential ints."""
    print("\n" + "=" * 60)
    print("Example 3: Chain Length Distribution")
    print("=" * 60)

    n = 5000
    random_keys = [f"key-{x}" for x in np.random.randint(0, 10**9, size=n * 2)]
    random_keys = list(dict.fromkeys(random_keys))[:n]
    sequential_keys = list(range(n))

    maps = {
        "random strings": growth_trace(random_keys)["map"],
        "sequential ints": growth_trace(sequential_keys)["map"],
    }

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    for ax, (name, m) in zip(axes, maps.items()):
        summary = occupancy_summary(m)
        hist = chain_length_histogram(m)
        print(f"\n  {name}:")
        for k, v in summary.items():
            print(f"    {k:<15} {v:.4f}" if isinstance(v, float) else f"    {k:<15} {v}")

        ax.bar(np.arange(hist.size), hist, color=COLORS["blue"], edgecolor="white")
        ax.set_xlabel("Chain length")
        ax.set_ylabel("Buckets")
        ax.set_title(f"{name}\nload={summary['load_factor']:.3f}, "
                     f"empty={summary['empty_fraction']:.1%}",
                     fontsize=10, fontweight="bold")
        ax.grid(True, alpha=0.3, axis="y")

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "02_chain_distribution.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_chain_distribution.png")


# ---------------------------------------------------------------------------
# Example 4: Collisions and Negative Hashes
# ---------------------------------------------------------------------------
def example_4_collisions():
    """Show abs() folding h and -h together, and lookups degrading with chain length."""
    print("\n" + "=" * 60)
    print("Example 4: Collisions and Negative Hashes")
    print("=" * 60)

    m = HashMap(8)
    m.put(5, "pos")
    m.put(-5, "neg")
    lengths = chain_lengths(m)
    print(f"\n  keys 5 and -5 in capacity 8 -> bucket sizes {lengths.tolist()}")
    print(f"  get(5)={m.get(5)!r}, get(-5)={m.get(-5)!r}")

    # Keys that are all multiples of the capacity collide until the table grows.
    chain_sizes = [1, 2, 4, 8, 16]
    timings = []
    for c in chain_sizes:
        cap = 64
        m = HashMap(cap)
        keys = [i * cap for i in range(c)]
        for k in keys:
            m.put(k, k)
        start = time.perf_counter()
        for _ in range(2000):
            m.contains_key(keys[-1])
        timings.append((time.perf_counter() - start) / 2000 * 1e6)
        print(f"  chain length {c:>2}: {timings[-1]:.3f} us per contains_key")

    fig, ax = plt.subplots(figsize=(7, 5))
    ax.plot(chain_sizes, timings, "o-", color=COLORS["orange"])
    ax.set_xlabel("Entries sharing one bucket")
    ax.set_ylabel("contains_key time (us)")
    ax.set_title("Lookup Cost Grows With Chain Length", fontsize=10, fontweight="bold")
    ax.grid(True, alpha=0.3)
    fig.savefig(VIZ_DIR / "03_collisions.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_collisions.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Bundle the visualizations into one PDF."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    titles = {
        "01_growth_trace.png": "Example 2: Growth Trace",
        "02_chain_distribution.png": "Example 3: Chain Length Distribution",
        "03_collisions.png": "Example 4: Collisions and Negative Hashes",
    }

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Separate-Chaining HashMap", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        info_text = (
            "Buckets hold chains of entries; index = abs(hash(key)) % capacity.\n"
            f"The table doubles whenever size / capacity reaches {LOAD_FACTOR_THRESHOLD}.\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.40, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("HashMap Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_contract()
    example_2_growth_trace()
    example_3_chain_distribution()
    example_4_collisions()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
