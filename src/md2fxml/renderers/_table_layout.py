#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/renderers/_table_layout.py
"""Per-table grid cursor and column width accumulation.

Final pixel widths are unknown while markup is generated, so each column
gets a dimensionless weight summed over its cells. The weights are
normalized into fractions when the table closes; the post-layout pass turns
the fractions into absolute widths once the container width is known.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from md2fxml.ast.nodes import TableBlock
from md2fxml.exceptions import StructuralConsistencyError


def cell_weight(width: float, child_count: int) -> float:
    """Return the column weight contributed by one cell.

    The square root damps very wide cells, and dividing by half the child
    count plus one discounts cells made of many short fragments. The
    constants only need to be consistent between cells of one table.

    Parameters
    ----------
    width : float
        Approximate text width of the cell
    child_count : int
        Number of immediate children of the cell

    Returns
    -------
    float
        Unnormalized weight

    Examples
    --------
    >>> cell_weight(8.0, 2)
    2.0

    """
    return math.sqrt(width / (child_count / 2.0 + 1))


@dataclass
class TableContext:
    """Grid cursor and column weights of the table being rendered.

    Parameters
    ----------
    table : TableBlock
        The table this context belongs to
    row : int, default 0
        Index of the current row
    column : int, default 0
        Index of the current column within the row
    column_weights : list of float
        Accumulated weight per column

    """

    table: TableBlock
    row: int = 0
    column: int = 0
    column_weights: list[float] = field(default_factory=list)

    def add_weight(self, weight: float) -> None:
        """Add a cell's weight to the current column.

        Raises
        ------
        StructuralConsistencyError
            If the current column lies beyond every column seen so far

        """
        known = len(self.column_weights)
        if self.column == known:
            self.column_weights.append(weight)
        elif self.column < known:
            self.column_weights[self.column] += weight
        else:
            raise StructuralConsistencyError(
                f"Inconsistent column index {self.column} in row {self.row}: only {known} column(s) known",
                node_kind="TableCell",
            )

    def next_column(self) -> None:
        self.column += 1

    def next_row(self) -> None:
        self.row += 1
        self.column = 0

    @property
    def weight_sum(self) -> float:
        return sum(self.column_weights)

    def fractions(self) -> list[float]:
        """Return each column's share of the total weight.

        Empty when the total is not positive. Every fraction lies in
        ``[0, 1]`` and the fractions sum to 1 within floating tolerance.
        """
        total = self.weight_sum
        if total <= 0.0:
            return []
        return [weight / total for weight in self.column_weights]
