"""Plain-text rendering of a board."""
from .board import Board


def render_ansi(board: Board, show_coordinates: bool = False) -> str:
    """
    Render the visible board as text.

    Hidden cells show as ``.``, flags as ``F``, revealed mines as ``*``,
    revealed empty cells as a blank and revealed numbers as their digit.
    """
    lines = []
    if show_coordinates:
        lines.append("   " + "".join(f"{col % 10} " for col in range(board.size)))

    for row, cells in enumerate(board.get_blocks()):
        row_str = f"{row % 10:>2} " if show_coordinates else ""
        for cell in cells:
            if cell.is_flagged:
                row_str += "F"
            elif cell.is_hidden:
                row_str += "."
            elif cell.is_mine:
                row_str += "*"
            elif cell.is_empty:
                row_str += " "
            else:
                row_str += str(cell.value)
            row_str += " "
        lines.append(row_str)

    return "\n".join(lines)


def render_solution(board: Board) -> str:
    """Render the full layout regardless of cell state (debugging aid)."""
    lines = []
    for cells in board.get_blocks():
        row_str = ""
        for cell in cells:
            if cell.is_mine:
                row_str += " M "
            elif cell.is_number:
                row_str += f" {cell.value} "
            else:
                row_str += "   "
        lines.append(row_str)
    return "\n".join(lines)
