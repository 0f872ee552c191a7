#!/usr/bin/env python3
"""
Synthetic edge-list generator for degree separation benchmarks.

Writes a two-column CSV of undirected edges. The graph is made of several
road-like components: each is a ring of nodes with extra chord edges, so
distances stay short enough to be interesting but are not all equal.

WARNING: statistics cost one BFS per node, i.e. O(V * (V + E)). Keep
--components * --nodes in the low tens of thousands for interactive runs.
"""

import argparse
import random
import sys

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB


def generate_component_edges(
    first_node: int,
    nodes: int,
    chords: int,
    rng: random.Random,
) -> list[tuple[int, int]]:
    """
    Generate edges for one connected component.

    Args:
        first_node: Id of the component's first node; ids are consecutive.
        nodes: Number of nodes in the component.
        chords: Number of extra random edges added on top of the ring.
        rng: Random number generator for chord endpoints.

    Returns:
        List of (node_a, node_b) edge tuples.
    """
    edges = []

    for i in range(nodes):
        # Ring edge: i -- (i+1) % nodes
        edges.append((first_node + i, first_node + (i + 1) % nodes))

    for _ in range(chords):
        a, b = rng.sample(range(nodes), 2)
        edges.append((first_node + a, first_node + b))

    return edges


def generate_synthetic_dataset(
    output_path: str,
    num_components: int,
    nodes: int,
    chords: int,
    seed: int,
) -> int:
    """
    Generate a synthetic edge list and stream it to output_path.

    Returns:
        Total number of edges written.
    """
    rng = random.Random(seed)
    total_edges = 0

    with open(output_path, "w", encoding="utf-8", buffering=BUFFER_SIZE) as f:
        for c in range(num_components):
            # Seed per component so output does not depend on earlier components
            rng.seed((seed, c))

            for node_a, node_b in generate_component_edges(c * nodes + 1, nodes, chords, rng):
                f.write(f"{node_a},{node_b}\n")
                total_edges += 1

            if (c + 1) % 100 == 0:
                print(f"  Generated {c + 1}/{num_components} components...", file=sys.stderr)

    return total_edges


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic undirected edge list.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # A single road-network-sized component (~1200 nodes, like euroroad)
  python generate_synthetic_edges.py --out data/synthetic.csv --components 1 --nodes 1200

  # Several disconnected components with denser chords
  python generate_synthetic_edges.py --out data/islands.csv --components 8 --nodes 200 --chords 40
""",
    )

    parser.add_argument("--out", required=True, help="Output file path")
    parser.add_argument(
        "--components",
        type=int,
        default=4,
        help="Number of disconnected components (default: 4)",
    )
    parser.add_argument(
        "--nodes",
        type=int,
        default=250,
        help="Number of nodes per component (default: 250)",
    )
    parser.add_argument(
        "--chords",
        type=int,
        default=25,
        help="Extra random edges per component (default: 25)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )

    args = parser.parse_args()

    if args.components < 1:
        parser.error("--components must be at least 1")
    if args.nodes < 3:
        parser.error("--nodes must be at least 3")
    if args.chords < 0:
        parser.error("--chords must not be negative")

    total_nodes = args.components * args.nodes

    print("=" * 60, file=sys.stderr)
    print("Synthetic Edge List Generator", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"Output: {args.out}", file=sys.stderr)
    print(f"Components: {args.components:,}", file=sys.stderr)
    print(f"Nodes per component: {args.nodes}", file=sys.stderr)
    print(f"Chords per component: {args.chords}", file=sys.stderr)
    print(f"Seed: {args.seed}", file=sys.stderr)
    print(f"Total nodes: {total_nodes:,}", file=sys.stderr)
    print("=" * 60, file=sys.stderr)

    total_edges = generate_synthetic_dataset(
        output_path=args.out,
        num_components=args.components,
        nodes=args.nodes,
        chords=args.chords,
        seed=args.seed,
    )

    print(f"Done! Wrote {total_edges:,} edges to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()
