"""
graph-properties: Structural analysis of finite graphs.

This package computes properties of directed and undirected graphs given
as adjacency maps keyed by vertex identifiers.

Available analyses:
- dfs: Depth-first search engine with pluggable hooks
- connectivity: Connectivity, acyclicity, trees, cycles, Euler tours
- bipartite: Bipartition by odd-cycle detection
- biconnectivity: Cutvertices and biconnected components
- colouring: Greedy vertex colouring
- planarity: LR-planarity test with low-point / nesting-depth orientation
"""

__version__ = "0.1.0"

# Graph model and input adapters
from .adapter import (
    GraphBuilder,
    GraphDeclaration,
    build_adjacency,
    graph_from_declaration,
    graphs_from_declarations,
)

# Biconnectivity
from .biconnectivity import (
    BiconnectedComponents,
    cutvertices,
    find_biconnected_components,
    is_biconnected,
)

# Bipartition
from .bipartite import (
    chromaticity,
    decompose_bipartite,
    is_bipartite,
    is_complete_bipartite,
    is_star,
)

# Vertex colouring
from .colouring import colourability, colour_vertices

# Connectivity and degree patterns
from .connectivity import (
    is_acyclic,
    is_complete,
    is_connected,
    is_cycle,
    is_eulerian,
    is_gear,
    is_tree,
    is_wheel,
)

# Degree statistics
from .degrees import adjacency_matrix, degree_sequence, max_degree

# Depth-first search
from .dfs import DfsHooks, connected_components, dfs, spanning_tree, visit_dfs
from .generator import random_graph
from .graph import Graph

# Planarity
from .planarity import (
    LowPoints,
    PlanarityResult,
    check_planarity,
    compute_lowpoints,
    is_planar,
)
from .properties import GraphProperties, compute_properties

# On-demand queries
from .queries import GraphStore

# Serialization
from .serialization import from_dict, from_json, to_dict, to_json
from .types import (
    Colour,
    EdgeSlot,
    GraphView,
    TraceCallback,
    TraceEvent,
    TraceType,
)

# Errors and validation
from .validation import (
    AlgorithmInvariantError,
    EdgeNotFoundError,
    GraphError,
    IndexOutOfRangeError,
    InvalidDeclarationError,
    MalformedGraphDataError,
    UnknownGraphError,
    UnknownVertexError,
    UnsupportedOperationError,
    validate_adjacency,
    validate_symmetry,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Colour",
    "EdgeSlot",
    "GraphView",
    "TraceType",
    "TraceEvent",
    "TraceCallback",
    # Graph model
    "Graph",
    "GraphProperties",
    "compute_properties",
    # Input adapters
    "GraphDeclaration",
    "GraphBuilder",
    "build_adjacency",
    "graph_from_declaration",
    "graphs_from_declarations",
    "random_graph",
    # Depth-first search
    "DfsHooks",
    "dfs",
    "visit_dfs",
    "spanning_tree",
    "connected_components",
    # Connectivity
    "is_connected",
    "is_acyclic",
    "is_tree",
    "is_cycle",
    "is_eulerian",
    "is_complete",
    "is_wheel",
    "is_gear",
    # Bipartition
    "decompose_bipartite",
    "is_bipartite",
    "is_complete_bipartite",
    "is_star",
    "chromaticity",
    # Biconnectivity
    "BiconnectedComponents",
    "find_biconnected_components",
    "is_biconnected",
    "cutvertices",
    # Colouring
    "colour_vertices",
    "colourability",
    # Degrees
    "degree_sequence",
    "max_degree",
    "adjacency_matrix",
    # Planarity
    "check_planarity",
    "is_planar",
    "compute_lowpoints",
    "LowPoints",
    "PlanarityResult",
    # Queries
    "GraphStore",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors and validation
    "GraphError",
    "UnknownVertexError",
    "IndexOutOfRangeError",
    "EdgeNotFoundError",
    "UnsupportedOperationError",
    "MalformedGraphDataError",
    "UnknownGraphError",
    "InvalidDeclarationError",
    "AlgorithmInvariantError",
    "validate_adjacency",
    "validate_symmetry",
]
