"""Example: routing between US cities with indexgraph

Builds the classic weighted city graph, then answers hop-count, distance and
spanning tree questions about it.
"""

from indexgraph import (
    Graph,
    bfs,
    dijkstra_by_vertex,
    edges_to_vertices,
    mst,
    reconstruct_path,
    total_weight,
)

CITIES = [
    "Seattle", "San Francisco", "Los Angeles", "Denver", "Kansas City", "Chicago",
    "Boston", "New York", "Atlanta", "Miami", "Dallas", "Houston",
]

ROADS = [
    ("Seattle", "Chicago", 2097), ("Seattle", "Denver", 1331),
    ("Seattle", "San Francisco", 807), ("San Francisco", "Denver", 1267),
    ("San Francisco", "Los Angeles", 381), ("Los Angeles", "Denver", 1015),
    ("Los Angeles", "Kansas City", 1663), ("Los Angeles", "Dallas", 1435),
    ("Denver", "Chicago", 1003), ("Denver", "Kansas City", 599),
    ("Kansas City", "Chicago", 533), ("Kansas City", "New York", 1260),
    ("Kansas City", "Atlanta", 864), ("Kansas City", "Dallas", 496),
    ("Chicago", "Boston", 983), ("Chicago", "New York", 787),
    ("Boston", "New York", 214), ("Atlanta", "New York", 888),
    ("Atlanta", "Dallas", 781), ("Atlanta", "Houston", 810),
    ("Atlanta", "Miami", 661), ("Houston", "Miami", 1187),
    ("Houston", "Dallas", 239),
]


def build_graph() -> Graph:
    graph = Graph(CITIES)
    for a, b, miles in ROADS:
        graph.add_edge_by_vertices(a, b, weight=miles)
    return graph


def main():
    graph = build_graph()
    print(graph)

    print("=" * 60)
    print("Fewest hops from Boston to Miami")
    print("=" * 60)
    path = bfs(graph, graph.index_of("Boston"), graph.index_of("Miami"))
    print(" -> ".join(edges_to_vertices(graph, path)))

    print("=" * 60)
    print("Shortest distances from New York")
    print("=" * 60)
    distances, predecessors = dijkstra_by_vertex(graph, "New York")
    for city, miles in sorted(distances.items(), key=lambda item: item[1]):
        print(f"  {city:<14} {miles:>5} miles")
    route = reconstruct_path(
        predecessors, graph.index_of("New York"), graph.index_of("San Francisco")
    )
    print("Route to San Francisco: " + " -> ".join(edges_to_vertices(graph, route)))

    print("=" * 60)
    print("Minimum spanning tree")
    print("=" * 60)
    tree = mst(graph)
    for edge in tree:
        print(f"  {graph[edge.u]} - {graph[edge.v]} ({edge.weight})")
    print(f"Total: {total_weight(tree)} miles")


if __name__ == "__main__":
    main()
