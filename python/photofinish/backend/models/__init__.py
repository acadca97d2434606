from photofinish.backend.models.board import Board, Direction, Offset

__all__ = ["Board", "Direction", "Offset"]
