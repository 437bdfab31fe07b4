from dataclasses import dataclass


@dataclass
class AlgorithmStats:
    """
    Work done by one run of a hull algorithm.

    ``num_ops`` counts evaluations of the side predicate. It is meant for
    understanding the complexity of one algorithm, not for comparing two.
    """
    num_ops: int = 0
    num_allocs: int = 0
    num_bytes: int = 0

    def __add__(self, other: "AlgorithmStats") -> "AlgorithmStats":
        return AlgorithmStats(
            self.num_ops + other.num_ops,
            self.num_allocs + other.num_allocs,
            self.num_bytes + other.num_bytes,
        )
