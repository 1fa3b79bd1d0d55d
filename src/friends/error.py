class FriendsError(Exception):
    pass


class GraphFormatError(FriendsError):
    """The graph file is malformed"""

    def __init__(self, message: str, line_number: int):
        super().__init__(f"Line {line_number}: {message}")
        self.line_number = line_number
