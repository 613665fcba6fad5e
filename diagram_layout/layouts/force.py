"""
Force-directed layout using a spring-electrical model.

Simulates physical forces:
- All node pairs repel each other (Coulomb's law, O(n^2) per iteration)
- Linked nodes attract or push apart toward an ideal length (Hooke's law)

Each iteration's displacement is capped by a temperature that cools
multiplicatively, so the simulation settles instead of oscillating.
Forces act between node centers.
"""

import logging
import math
import random

from ..config import ForceDirectedLayoutConfig
from ..graph import LayoutGraph, LayoutNode

logger = logging.getLogger(__name__)


def force_layout(graph: LayoutGraph, config: ForceDirectedLayoutConfig) -> list[LayoutNode]:
    """
    Arrange nodes by running a spring-electrical simulation.

    Locked nodes still push and pull on the others but never move. When any
    node is locked the final centering step is skipped, since it would move
    the locked nodes too.

    Args:
        graph: Graph to arrange (modified in-place)
        config: Simulation settings; `seed` makes runs reproducible

    Returns:
        The graph's nodes
    """
    nodes = graph.nodes
    if not nodes:
        return nodes

    count = len(nodes)
    rng = random.Random(config.seed)
    logger.debug("Force layout: %d nodes, %d iterations", count, config.iterations)

    if config.randomize_initial_positions:
        spread = config.spread
        for node in nodes:
            if node.locked:
                continue
            node.move_to((rng.random() - 0.5) * spread, (rng.random() - 0.5) * spread)

    # Per-node scratch arrays indexed by graph index
    xs = [n.position.x for n in nodes]
    ys = [n.position.y for n in nodes]
    half_w = [n.size.width / 2 for n in nodes]
    half_h = [n.size.height / 2 for n in nodes]
    locked = [n.locked for n in nodes]
    springs = [(src, dst) for src, dst in graph.edges() if src != dst]

    epsilon = config.min_distance
    temperature = config.initial_temperature

    for _ in range(config.iterations):
        fx = [0.0] * count
        fy = [0.0] * count

        # Repulsion between every pair
        for i in range(count):
            cx_i = xs[i] + half_w[i]
            cy_i = ys[i] + half_h[i]
            for j in range(i + 1, count):
                dx = xs[j] + half_w[j] - cx_i
                dy = ys[j] + half_h[j] - cy_i
                distance = math.hypot(dx, dy)
                if distance > 0:
                    ux, uy = dx / distance, dy / distance
                else:
                    # Coincident: push apart along a seeded random direction
                    angle = rng.random() * 2 * math.pi
                    ux, uy = math.cos(angle), math.sin(angle)
                distance = max(distance, epsilon)

                force = config.repulsion_constant / (distance * distance)
                fx[i] -= ux * force
                fy[i] -= uy * force
                fx[j] += ux * force
                fy[j] += uy * force

        # Springs along links
        for src, dst in springs:
            dx = xs[dst] + half_w[dst] - xs[src] - half_w[src]
            dy = ys[dst] + half_h[dst] - ys[src] - half_h[src]
            distance = math.hypot(dx, dy)
            if distance == 0:
                continue

            ux, uy = dx / distance, dy / distance
            force = config.spring_constant * (max(distance, epsilon) - config.spring_length)
            fx[src] += ux * force
            fy[src] += uy * force
            fx[dst] -= ux * force
            fy[dst] -= uy * force

        for i in range(count):
            if locked[i]:
                continue
            magnitude = math.hypot(fx[i], fy[i])
            if magnitude > temperature:
                scale = temperature / magnitude
                fx[i] *= scale
                fy[i] *= scale
            xs[i] += fx[i]
            ys[i] += fy[i]

        temperature *= config.cooling_factor

    for i, node in enumerate(nodes):
        if not locked[i]:
            node.move_to(xs[i], ys[i])

    if any(locked):
        logger.debug("Locked nodes present, skipping centering")
    else:
        graph.center_on_origin()

    return nodes
