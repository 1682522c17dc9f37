class InvalidGraphError(ValueError):
    """
    Raised when a weight matrix cannot be used for a global minimum cut:
    fewer than 2 vertices, not square, asymmetric, non-zero diagonal,
    negative or non-integral weights, or mismatched labels.
    """


class GraphFormatError(ValueError):
    """
    Raised by the adjacency list reader for a malformed line.
    """

    def __init__(self, message: str, line_no: int = None):
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no
