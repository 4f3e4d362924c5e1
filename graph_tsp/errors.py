class GraphError(Exception):
    pass


class InvalidArgumentError(GraphError, ValueError):
    """Bad vertex value, self-loop or bad weight."""


class NotFoundError(GraphError, LookupError):
    """A vertex or edge referenced by an operation is not in the graph."""


class InvalidStateError(GraphError, RuntimeError):
    """The graph is not in a state the operation supports (e.g. MST on a directed graph)."""


class GraphFormatError(GraphError):
    pass
