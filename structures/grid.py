"""
grid.py — Spatial Grid Model
=============================
Rectangular matrix of cells with 4-directional adjacency and wall cells.
This is the structure the pathfinding tab searches over.

Design decisions:
  - A cell is identified by its (row, col) tuple.  Search algorithms only
    ever hold identifiers, never Cell references, so `parent` is a weak
    back-pointer into the grid's own storage.
  - Cells live in a row-major list of lists; neighbour order is fixed
    (up, down, left, right) so every run over the same grid is replayable.
  - Start and end are owned by the grid: moving one clears the old flag,
    which keeps "exactly one start / exactly one end" true at all times.
  - The grid exposes the same search surface as Graph (node, successors,
    estimate, path_to, copy) so the search engine never branches on type.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from structures.errors import InvalidInput


CellId = Tuple[int, int]

INF = float("inf")

# up, down, left, right
DIRECTIONS: List[Tuple[int, int]] = [(-1, 0), (1, 0), (0, -1), (0, 1)]


# ---------------------------------------------------------------------------
# Cell
# ---------------------------------------------------------------------------
class Cell:
    """
    Attributes:
        row, col    : Position in the grid.
        is_wall     : Obstacle flag; search never enters a wall.
        is_start    : Maintained by Grid.set_start.
        is_end      : Maintained by Grid.set_end.
        is_visited  : Set by the search engine when the cell is finalised.
        is_path     : Set when the cell lies on the reconstructed path.
        distance    : Best known distance from start (INF = unreached).
        heuristic   : A* estimate to the end cell.
        parent      : (row, col) of the predecessor, or None.
    """

    __slots__ = (
        "row", "col", "is_wall", "is_start", "is_end",
        "is_visited", "is_path", "distance", "heuristic", "parent",
    )

    def __init__(self, row: int, col: int, is_wall: bool = False):
        self.row:        int              = row
        self.col:        int              = col
        self.is_wall:    bool             = is_wall
        self.is_start:   bool             = False
        self.is_end:     bool             = False
        self.reset_search_state()

    @property
    def id(self) -> CellId:
        return (self.row, self.col)

    @property
    def blocked(self) -> bool:
        return self.is_wall

    def reset_search_state(self) -> None:
        """Wipe everything a search writes; keep walls and start / end."""
        self.is_visited: bool              = False
        self.is_path:    bool              = False
        self.distance:   float             = INF
        self.heuristic:  float             = 0.0
        self.parent:     Optional[CellId]  = None

    def __repr__(self) -> str:
        flags = "".join(
            ch for ch, on in (
                ("#", self.is_wall), ("S", self.is_start), ("E", self.is_end),
                ("v", self.is_visited), ("p", self.is_path),
            ) if on
        )
        return f"Cell({self.row},{self.col}{' ' + flags if flags else ''})"


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------
class Grid:
    """
    Attributes:
        rows, cols : Dimensions (both >= 1).
        cells      : Row-major [[Cell]].
        start      : (row, col) of the start cell.
        end        : (row, col) of the end cell.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        start: Optional[CellId] = None,
        end: Optional[CellId] = None,
    ):
        if not isinstance(rows, int) or not isinstance(cols, int) or rows < 1 or cols < 1:
            raise InvalidInput(f"Grid needs at least one row and one column, got {rows}x{cols}")
        self.rows: int = rows
        self.cols: int = cols
        self.cells: List[List[Cell]] = [[Cell(r, c) for c in range(cols)] for r in range(rows)]
        self.start: CellId = (0, 0)
        self.end:   CellId = (rows - 1, cols - 1)
        self.set_start(start if start is not None else self.start)
        self.set_end(end if end is not None else self.end)

    # ==================================================================
    # LOOKUP
    # ==================================================================
    def coerce_id(self, raw) -> CellId:
        """Turn (r, c) / [r, c] into a validated in-bounds cell id."""
        if (
            not isinstance(raw, (tuple, list))
            or len(raw) != 2
            or not all(isinstance(v, int) and not isinstance(v, bool) for v in raw)
        ):
            raise InvalidInput(f"Grid cell must be a (row, col) pair of ints, got {raw!r}")
        cell_id = (raw[0], raw[1])
        if cell_id not in self:
            raise InvalidInput(f"Cell {cell_id} is outside the {self.rows}x{self.cols} grid")
        return cell_id

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def node(self, cell_id: CellId) -> Cell:
        return self.cells[cell_id[0]][cell_id[1]]

    def node_ids(self) -> List[CellId]:
        return [(r, c) for r in range(self.rows) for c in range(self.cols)]

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def __contains__(self, cell_id) -> bool:
        try:
            r, c = cell_id
        except (TypeError, ValueError):
            return False
        return isinstance(r, int) and isinstance(c, int) and 0 <= r < self.rows and 0 <= c < self.cols

    def __len__(self) -> int:
        return self.rows * self.cols

    # ==================================================================
    # EDITING
    # ==================================================================
    def set_start(self, cell_id: CellId) -> None:
        cell_id = self.coerce_id(cell_id)
        self.node(self.start).is_start = False
        self.start = cell_id
        self.node(cell_id).is_start = True

    def set_end(self, cell_id: CellId) -> None:
        cell_id = self.coerce_id(cell_id)
        self.node(self.end).is_end = False
        self.end = cell_id
        self.node(cell_id).is_end = True

    def set_wall(self, cell_id: CellId, is_wall: bool = True) -> None:
        """Place or clear a wall.  Start and end can never become walls."""
        cell_id = self.coerce_id(cell_id)
        if is_wall and cell_id in (self.start, self.end):
            raise InvalidInput(f"Cannot place a wall on the start or end cell {cell_id}")
        self.node(cell_id).is_wall = is_wall

    def toggle_wall(self, cell_id: CellId) -> None:
        cell = self.node(self.coerce_id(cell_id))
        self.set_wall(cell.id, not cell.is_wall)

    def walls(self) -> List[CellId]:
        return [cell.id for cell in self if cell.is_wall]

    # ==================================================================
    # SEARCH SURFACE
    # ==================================================================
    def is_blocked(self, cell_id: CellId) -> bool:
        return self.node(cell_id).is_wall

    def successors(self, cell_id: CellId) -> List[Tuple[CellId, int]]:
        """Non-wall 4-neighbours as [(cell_id, 1)], in up/down/left/right order."""
        r, c = cell_id
        result = []
        for dr, dc in DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < self.rows and 0 <= nc < self.cols and not self.cells[nr][nc].is_wall:
                result.append(((nr, nc), 1))
        return result

    def estimate(self, a: CellId, b: Optional[CellId]) -> float:
        """Manhattan distance, admissible for 4-directional unit moves."""
        if b is None:
            return 0.0
        return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))

    def path_to(self, cell_id: CellId) -> List[CellId]:
        """Follow parent ids back to the start.  Empty if never reached."""
        if not self.node(cell_id).is_visited:
            return []
        path: List[CellId] = []
        seen = set()
        cur: Optional[CellId] = cell_id
        while cur is not None:
            if cur in seen:
                raise RuntimeError(f"Parent chain cycles at {cur}")
            seen.add(cur)
            path.append(cur)
            cur = self.node(cur).parent
        path.reverse()
        return path

    def reset_search_state(self) -> None:
        for cell in self:
            cell.reset_search_state()

    # ==================================================================
    # COPY / SERIALISATION
    # ==================================================================
    def copy(self) -> "Grid":
        """Structural copy (walls, start, end) with a clean search state."""
        g = Grid(self.rows, self.cols, start=self.start, end=self.end)
        for cell in self:
            if cell.is_wall:
                g.node(cell.id).is_wall = True
        return g

    def to_dict(self) -> dict:
        return {
            "rows":  self.rows,
            "cols":  self.cols,
            "start": list(self.start),
            "end":   list(self.end),
            "walls": [list(w) for w in self.walls()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Grid":
        """
        Accepts either {"rows", "cols", "start", "end", "walls"} or
        {"layout": ["S..#", "...E"]} (see from_text).
        """
        if not isinstance(data, dict):
            raise InvalidInput("Grid description must be an object")
        if "layout" in data:
            return cls.from_text(data["layout"])
        try:
            g = cls(data["rows"], data["cols"], start=data.get("start"), end=data.get("end"))
        except KeyError as exc:
            raise InvalidInput(f"Grid description is missing {exc.args[0]!r}") from exc
        walls = data.get("walls", [])
        if not isinstance(walls, list):
            raise InvalidInput("Grid 'walls' must be a list of [row, col] pairs")
        for wall in walls:
            g.set_wall(wall)
        return g

    @classmethod
    def from_text(cls, layout) -> "Grid":
        """
        Build a grid from rows of characters:
            .  open cell        #  wall
            S  start            E  end
        Either a list of strings or one newline-separated string.
        """
        if not isinstance(layout, (str, list, tuple)) or not all(isinstance(line, str) for line in layout):
            raise InvalidInput("Grid layout must be a string or a list of strings")
        lines: Sequence[str] = layout.splitlines() if isinstance(layout, str) else layout
        lines = [line.strip() for line in lines if line.strip()]
        if not lines:
            raise InvalidInput("Grid layout is empty")
        width = len(lines[0])
        if any(len(line) != width for line in lines):
            raise InvalidInput("Grid layout rows must all have the same length")

        marks: Dict[str, CellId] = {}
        walls: List[CellId] = []
        for r, line in enumerate(lines):
            for c, ch in enumerate(line):
                if ch in "SE":
                    if ch in marks:
                        raise InvalidInput(f"Grid layout has more than one {ch!r}")
                    marks[ch] = (r, c)
                elif ch == "#":
                    walls.append((r, c))
                elif ch != ".":
                    raise InvalidInput(f"Unknown grid layout character {ch!r}")

        g = cls(len(lines), width, start=marks.get("S"), end=marks.get("E"))
        for wall in walls:
            g.set_wall(wall)
        return g

    def to_text(self) -> List[str]:
        out = []
        for row in self.cells:
            line = []
            for cell in row:
                if cell.is_start:
                    line.append("S")
                elif cell.is_end:
                    line.append("E")
                elif cell.is_wall:
                    line.append("#")
                else:
                    line.append(".")
            out.append("".join(line))
        return out

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, start={self.start}, end={self.end}, walls={len(self.walls())})"
