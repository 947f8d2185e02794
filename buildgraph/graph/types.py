from buildgraph.result import BuildError


class GraphError(BuildError):
    def __init__(self, message: str) -> None:
        super().__init__("graph", message)


class CycleError(GraphError):
    def __init__(self, cycle: list[str]):
        super().__init__("Cycle detected: " + " -> ".join(cycle))
        self.cycle = cycle
