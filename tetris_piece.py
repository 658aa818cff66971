
"""Piece model, tetromino catalog, collision and simple-kick rotation"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Optional, Sequence, Tuple

from tetris_board import Board, COLS, ROWS, EMPTY
from tetris_rng import PieceRandom

Shape = Sequence[Sequence[int]]

# Shapes carry their board tag in every filled cell: I=1 O=2 T=3 S=4 Z=5 J=6 L=7
SHAPES = MappingProxyType({
    "I": ((1,1,1,1),),
    "O": ((2,2),
          (2,2)),
    "T": ((0,3,0),
          (3,3,3)),
    "S": ((0,4,4),
          (4,4,0)),
    "Z": ((5,5,0),
          (0,5,5)),
    "J": ((6,0,0),
          (6,6,6)),
    "L": ((0,0,7),
          (7,7,7)),
})

TAGS = MappingProxyType({t: max(v for row in s for v in row) for t, s in SHAPES.items()})

# Colors per cell value (0 = empty)
COLORS = MappingProxyType({
    0: (0,0,0),
    1: (0,240,240),
    2: (240,240,0),
    3: (160,0,240),
    4: (0,240,0),
    5: (240,0,0),
    6: (0,0,240),
    7: (240,160,0),
})

# Rotation fallbacks tried in order: in place, left, right, up
KICKS: Tuple[Tuple[int,int], ...] = ((0,0), (-1,0), (1,0), (0,-1))

_default_rng = PieceRandom()


@dataclass
class ActivePiece:
    t: str
    shape: List[List[int]]
    x: int
    y: int
    color: Tuple[int,int,int]


def can_move(piece: ActivePiece, board: Board, dx: int, dy: int, shape: Optional[Shape] = None) -> bool:
    """Return True if the piece fits after shifting by (dx, dy).

    Cells above the top row only check the side walls; everything else must be
    inside the grid and land on an empty board cell.
    """
    shape = shape if shape is not None else piece.shape
    nx, ny = piece.x + dx, piece.y + dy
    for r, row in enumerate(shape):
        for c, v in enumerate(row):
            if not v:
                continue
            bx, by = nx + c, ny + r
            if bx < 0 or bx >= COLS or by >= ROWS:
                return False
            if by >= 0 and board.get(by, bx) != EMPTY:
                return False
    return True


def rotate_matrix(matrix: Shape, clockwise: bool) -> List[List[int]]:
    rows, cols = len(matrix), len(matrix[0])
    if clockwise:
        return [[matrix[rows - 1 - c][r] for c in range(rows)] for r in range(cols)]
    return [[matrix[c][cols - 1 - r] for c in range(rows)] for r in range(cols)]


def rotate(piece: Optional[ActivePiece], board: Board, clockwise: bool = True) -> bool:
    """Rotate in place, trying each of KICKS in turn. Leaves the piece untouched on failure."""
    if piece is None or piece.t == "O":
        return False
    rotated = rotate_matrix(piece.shape, clockwise)
    for dx, dy in KICKS:
        if can_move(piece, board, dx, dy, rotated):
            piece.shape = rotated
            piece.x += dx
            piece.y += dy
            return True
    return False


def spawn(rng=None) -> ActivePiece:
    t = (rng or _default_rng).next_piece()
    shape = [list(row) for row in SHAPES[t]]
    w = len(shape[0])
    return ActivePiece(t, shape, COLS // 2 - w // 2, 0, COLORS[TAGS[t]])


def lock(piece: Optional[ActivePiece], board: Board):
    """Write the piece's tags into the board. Caller guarantees a legal position."""
    if piece is None:
        return
    for r, row in enumerate(piece.shape):
        for c, v in enumerate(row):
            if v:
                board.set(piece.y + r, piece.x + c, v)


def piece_cells(piece: Optional[ActivePiece]) -> List[Tuple[int,int]]:
    if piece is None:
        return []
    cells = []
    for r, row in enumerate(piece.shape):
        for c, v in enumerate(row):
            if v and piece.y + r >= 0:
                cells.append((piece.x + c, piece.y + r))
    return cells
