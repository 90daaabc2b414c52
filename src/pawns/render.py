"""Text rendering of the board, top rank first"""

from src.pawns.board import Board


def separator_line(board: Board) -> str:
    return "  +" + "---+" * board.config.files


def render_board(board: Board) -> list[str]:
    """
    ex. starting position
      +---+---+---+---+---+---+---+---+
    8 |   |   |   |   |   |   |   |   |
      +---+---+---+---+---+---+---+---+
    7 | B | B | B | B | B | B | B | B |
    ...
        a   b   c   d   e   f   g   h
    """
    config = board.config
    separator = separator_line(board)
    lines = [separator]
    for rank in range(config.ranks - 1, -1, -1):
        cells = " | ".join(config.symbol(piece.color) for piece in board.rank(rank))
        lines.append(f"{rank + 1} | {cells} |")
        lines.append(separator)
    lines.append(" " * 4 + "   ".join(config.file_letters))
    return lines
