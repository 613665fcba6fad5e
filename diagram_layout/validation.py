"""
Graph validation - Check layout graphs for structural issues.

Layouts never fail on odd input, they skip what they cannot use. These checks
let a caller see what will be skipped, and verify the one precondition the
tree layout relies on (no cycle below a root).
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Hashable

from .analysis import find_back_edges, find_roots
from .graph import LayoutGraph


class IssueSeverity(str, Enum):
    """Severity levels for validation issues."""
    ERROR = "error"      # Layout precondition violated
    WARNING = "warning"  # Will be ignored by layouts, probably a mistake
    INFO = "info"        # Informational, may be intentional


@dataclass
class ValidationIssue:
    """A single validation issue found in a graph."""
    severity: IssueSeverity
    message: str
    node_key: Hashable | None = None
    link_index: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = {
            "type": self.severity.value,
            "message": self.message
        }
        if self.node_key is not None:
            result["node_key"] = self.node_key
        if self.link_index is not None:
            result["link_index"] = self.link_index
        return result


def validate_graph(graph: LayoutGraph) -> list[ValidationIssue]:
    """
    Validate a graph and return a list of issues.

    Checks for:
    - Empty graph - INFO
    - Unbound links (missing an endpoint) - INFO
    - Links to nodes that are not in the graph - WARNING
    - Self-referencing links - WARNING
    - Duplicate links (same from -> to) - WARNING

    Args:
        graph: The graph to validate

    Returns:
        List of ValidationIssue objects
    """
    issues: list[ValidationIssue] = []

    if not graph.nodes:
        issues.append(ValidationIssue(
            severity=IssueSeverity.INFO,
            message="Graph has no nodes"
        ))
        return issues

    seen_pairs: set[tuple[int, int]] = set()

    for i, link in enumerate(graph.links):
        if not link.is_bound:
            issues.append(ValidationIssue(
                severity=IssueSeverity.INFO,
                message="Unbound link (missing an endpoint)",
                link_index=i
            ))
            continue

        src = graph.index_of(link.from_node)
        dst = graph.index_of(link.to_node)
        if src is None or dst is None:
            outside = link.from_node if src is None else link.to_node
            issues.append(ValidationIssue(
                severity=IssueSeverity.WARNING,
                message=f"Link references a node outside the graph: {outside.key!r}",
                link_index=i
            ))
            continue

        if src == dst:
            issues.append(ValidationIssue(
                severity=IssueSeverity.WARNING,
                message="Self-referencing link (node points to itself)",
                node_key=link.from_node.key,
                link_index=i
            ))

        pair = (src, dst)
        if pair in seen_pairs:
            issues.append(ValidationIssue(
                severity=IssueSeverity.WARNING,
                message=f"Duplicate link from {link.from_node.key!r} to {link.to_node.key!r}",
                link_index=i
            ))
        else:
            seen_pairs.add(pair)

    return issues


def validate_tree(graph: LayoutGraph) -> list[ValidationIssue]:
    """
    Validate a graph for tree layout.

    Runs `validate_graph` and adds an ERROR for every link that closes a
    cycle reachable from the tree roots.
    """
    issues = validate_graph(graph)
    if not graph.nodes:
        return issues

    roots = find_roots(graph) or [0]
    link_index = {id(link): i for i, link in enumerate(graph.links)}

    for link in find_back_edges(graph, starts=roots):
        issues.append(ValidationIssue(
            severity=IssueSeverity.ERROR,
            message=f"Cycle below a root: {link.from_node.key!r} -> {link.to_node.key!r}",
            node_key=link.to_node.key,
            link_index=link_index[id(link)]
        ))

    return issues


def validation_summary(issues: list[ValidationIssue]) -> dict:
    """Counts of `issues` by severity; `valid` is False if any is an ERROR."""
    counts = Counter(issue.severity for issue in issues)
    return {
        "total": len(issues),
        "errors": counts[IssueSeverity.ERROR],
        "warnings": counts[IssueSeverity.WARNING],
        "info": counts[IssueSeverity.INFO],
        "valid": counts[IssueSeverity.ERROR] == 0
    }
