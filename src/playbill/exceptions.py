class StatementError(Exception):
    pass

class InvalidInputError(StatementError):
    pass

class UnresolvedPlayError(StatementError):
    def __init__(self, play_id: str):
        super().__init__(f"Unresolved play: {play_id!r}")
        self.play_id = play_id

class UnknownGenreError(StatementError):
    def __init__(self, genre: str):
        super().__init__(f"Unknown genre: {genre!r}")
        self.genre = genre
