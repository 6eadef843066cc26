"""
Computation graph inspection helpers.

Print and summarise the structure recorded on a Tape. Output is meant for
people debugging a graph, not for parsing.
"""

import numpy as np
from typing import Dict, List
from collections import Counter

from .tape import Tape
from .var import Var


def format_node(v: Var) -> str:
    """Diagnostic rendering of one node: value, grad, op tag and parent values."""
    return repr(v)


def _fan_outs(tape: Tape) -> List[int]:
    fan_outs = [0] * len(tape.nodes)
    for node in tape.nodes:
        for p in node.parents:
            fan_outs[p] += 1
    return fan_outs


def get_graph_stats(tape: Tape) -> Dict:
    """
    Collect graph statistics (without printing).

    Returns:
        dict with node/edge counts, leaf count, fan-in/fan-out max and mean,
        and a per-op count keyed by Op name
    """
    if not tape.nodes:
        return {
            'nodes': 0,
            'edges': 0,
            'leaves': 0,
            'max_fan_in': 0,
            'avg_fan_in': 0.0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'operations': {}
        }

    n_nodes = len(tape.nodes)
    fan_ins = [len(node.parents) for node in tape.nodes]
    fan_outs = _fan_outs(tape)
    op_counter = Counter(node.op.name for node in tape.nodes)

    return {
        'nodes': n_nodes,
        'edges': sum(fan_ins),
        'leaves': sum(1 for f in fan_ins if f == 0),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(tape: Tape, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph on `tape`.

    Args:
        tape: the Tape to inspect
        detailed: also list every node (only for graphs up to 100 nodes)

    Returns:
        the statistics dict from get_graph_stats()
    """
    if not tape.nodes:
        print("Empty computation graph")
        return {}

    stats = get_graph_stats(tape)
    n_nodes = stats['nodes']

    print("\n" + "=" * 70)
    print("COMPUTATION GRAPH SUMMARY")
    print("=" * 70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        print()
        print("=" * 70)
        print("DETAILED NODE LIST")
        print("=" * 70)
        for i, node in enumerate(tape.nodes):
            parent_info = ", ".join(f"Node{p}" for p in node.parents)
            print(f"Node {i:3d}: {node.op.name:12s} <- [{parent_info}]")

    print("=" * 70 + "\n")
    return stats


def print_computation_graph(tape: Tape, max_nodes: int = 20) -> None:
    """
    Print one line per node: index, op, value, grad and parent indices.

    Args:
        tape: the Tape to inspect
        max_nodes: print at most this many nodes
    """
    print("\n" + "=" * 70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("=" * 70)

    if not tape.nodes:
        print("Empty graph")
        return

    n_show = min(len(tape.nodes), max_nodes)

    for i, node in enumerate(tape.nodes[:n_show]):
        out_val = float(node.value)
        grad = float(node.grad)
        if node.parents:
            parent_info = ", ".join(f"Node{p}" for p in node.parents)
            print(f"Node {i:4d}: {node.op.name:6s} ({out_val:10.6f}, grad {grad:10.6f}) <- [{parent_info}]")
        else:
            print(f"Node {i:4d}: {node.op.name:6s} ({out_val:10.6f}, grad {grad:10.6f}) [leaf/input]")

    if len(tape.nodes) > max_nodes:
        print(f"... ({len(tape.nodes) - max_nodes} more nodes)")

    print("=" * 70 + "\n")
