"""Map a project onto the generic node/edge shape of the graph viewer."""

from __future__ import annotations

from flowboard.schemas import Graph, Project, RenderEdge, RenderNode, RenderNodeData


def project_graph(project: Project) -> Graph:
    """Build one render node per node and one render edge per edge, in order."""
    nodes = [
        RenderNode(id=node.id, position=node.position, data=RenderNodeData(node=node))
        for node in project.nodes
    ]
    edges = [
        RenderEdge(id=edge.id, source=edge.source, target=edge.target)
        for edge in project.edges
    ]
    return Graph(nodes=nodes, edges=edges)
