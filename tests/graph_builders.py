"""Entity graphs shared by the tests."""

from coreselector.models.entity import EntityGraph, EntityNode, NodeType


def lineage_graph() -> EntityGraph:
    """Cycle C1 -> Scenario S1 -> Pipeline P1 -> DataNodes D1, D2."""
    return EntityGraph.from_payload([
        ["C1", "Cycle 1", [
            ["S1", "Scenario 1", [
                ["P1", "Pipeline 1", [
                    ["D1", "Data 1", None, 3, False],
                    ["D2", "Data 2", None, 3, False],
                ], 2, False],
            ], 1, True],
        ], 0, False],
    ])


def wide_graph() -> EntityGraph:
    """Two cycles with sibling scenarios and pipelines.

    C1
      S1 (primary)
        P1: D1, D2
        P2: D3
      S2
        P3: D4
    C2
      S3
        P4: D5
    S4 (root scenario, no cycle)
    """
    def data(node_id):
        return EntityNode(node_id, f"Data {node_id}", (), NodeType.NODE)

    def pipeline(node_id, *children):
        return EntityNode(node_id, f"Pipeline {node_id}", children, NodeType.PIPELINE)

    def scenario(node_id, *children, primary=False):
        return EntityNode(node_id, f"Scenario {node_id}", children, NodeType.SCENARIO, primary)

    def cycle(node_id, *children):
        return EntityNode(node_id, f"Cycle {node_id}", children, NodeType.CYCLE)

    return EntityGraph((
        cycle("C1",
              scenario("S1", pipeline("P1", data("D1"), data("D2")),
                       pipeline("P2", data("D3")), primary=True),
              scenario("S2", pipeline("P3", data("D4")))),
        cycle("C2",
              scenario("S3", pipeline("P4", data("D5")))),
        scenario("S4"),
    ))
