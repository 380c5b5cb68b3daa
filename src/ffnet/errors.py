class ShapeMismatchError(ValueError):
    pass


class NumericDomainError(ValueError):
    pass


class UncalledForwardError(RuntimeError):

    def __init__(self, layer_name: str) -> None:
        super().__init__(
            f"{layer_name}: must call forward() before backward().")
        self.layer_name = layer_name
