"""
Tableau engine for linear programs of the form

    maximize c^T x  subject to  A x <= b,  x >= 0

using the Simplex Algorithm. Entries are kept as SymPy rationals so that
pivoting stays exact. In its current state, there are inputs for which
the algorithm will cycle as no anti-cycling rules have been put in place.

@author Suchith Sridhar Khajjayam
@date 27 Sep 2024
"""

from sympy import Matrix, Rational, Float, simplify

SLACK_VAR = "y"
REAL_VAR = "x"
EMPTY_VAR = " "

# Control the amount of Tableaus printed
PRINT = False

UNSOLVED = "unsolved"
OPTIMAL = "optimal"
UNBOUNDED = "unbounded"


class LPError(Exception):
    pass


class Unbounded(LPError):
    def __init__(self, message="LP is unbounded"):
        super().__init__(message)


class Unsolved(LPError):
    def __init__(self, message="LP is unsolved"):
        super().__init__(message)


def to_rational(value):
    # Go through the decimal repr so that 0.4 becomes 2/5 and not
    # its binary approximation.
    if isinstance(value, (float, Float)):
        return Rational(str(value))
    return Rational(value)


class Tableau:
    """
    Augmented matrix of an LP with m constraints and n variables.

    Layout, left to right: n structural columns, m slack columns and the
    right hand side. Rows 0..m-1 are constraints, the last row is the
    objective row holding the negated objective coefficients.
    """

    def __init__(self, tableau):
        self.tableau = Matrix(tableau).applyfunc(to_rational)
        rows, cols = self.tableau.shape
        if rows < 1 or cols < rows:
            raise ValueError(
                f"a tableau needs at least one row and as many columns as rows, got {rows}x{cols}"
            )
        self.num_constraints = rows - 1
        self.num_variables = cols - rows
        self.pivots = 0
        self.basis = self._find_basis()

    def is_unit_column(self, col, row):
        # A 1 in row and 0 everywhere else, objective row included
        return all(
            value == (1 if row_idx == row else 0)
            for row_idx, value in enumerate(self.tableau[:, col])
        )

    def _find_basis(self):
        """
        Basic column of each constraint row, None where a row has none.
        Columns are scanned right to left so that the slack columns of a
        freshly built tableau claim their rows before any structural
        column that happens to look the same.
        """
        basis = [None] * self.num_constraints
        for col in reversed(range(self.tableau.cols - 1)):
            for row in range(self.num_constraints):
                if basis[row] is None and self.is_unit_column(col, row):
                    basis[row] = col
        return basis

    @property
    def shape(self):
        return self.tableau.shape

    @property
    def A(self):
        """
        Get the structural block of the constraint rows.
        """
        return self.tableau[:-1, : self.num_variables]

    @property
    def b(self):
        """
        Get the right hand side column without the objective value.
        """
        return self.tableau[:-1, -1]

    @property
    def c(self):
        """
        Get the objective row without the right hand side entry.
        These are the reduced costs.
        """
        return self.tableau[-1, :-1]

    @property
    def d(self):
        """
        Get the value stored in the bottom right corner.
        This is the objective function value.
        """
        return self.tableau[-1, -1]

    def is_basic_feasible(self):
        return all(bi >= 0 for bi in self.b)

    def is_optimal(self):
        return not any(ci < 0 for ci in self.c)

    def pivot_column(self):
        # Most negative reduced cost, the first one wins a tie
        col = None
        min_value = 0
        for idx, ci in enumerate(self.c):
            if ci < min_value:
                col = idx
                min_value = ci
        return col

    def pivot_row(self, col):
        # Minimum positive ratio with the right hand side, first row wins a tie
        row = None
        min_ratio = None
        for row_idx in range(self.num_constraints):
            entry = self.tableau[row_idx, col]
            if entry == 0:
                continue
            ratio = self.tableau[row_idx, -1] / entry
            if ratio > 0 and (min_ratio is None or ratio < min_ratio):
                row = row_idx
                min_ratio = ratio
        return row

    def is_unbounded(self):
        col = self.pivot_column()
        return col is not None and self.pivot_row(col) is None

    @property
    def status(self):
        if self.is_optimal():
            return OPTIMAL
        if self.is_unbounded():
            return UNBOUNDED
        return UNSOLVED

    def scale_row(self, row_index, scale_factor):
        self.tableau.row_op(row_index, lambda x, _: x * scale_factor)

    def add_rows(self, target_row, source_row, scale_factor=1):
        self.tableau.row_op(
            target_row, lambda x, j: x + scale_factor * self.tableau[source_row, j]
        )

    def pivot(self, row, col):
        # Make a particular position 1 and 0 for all other rows in this column
        pivot_value = self.tableau[row, col]
        if pivot_value == 0:
            raise ValueError(f"cannot pivot on zero entry at ({row}, {col})")
        self.scale_row(row, 1 / pivot_value)
        for row_idx in range(self.tableau.rows):
            if row_idx != row:
                scale_factor = -self.tableau[row_idx, col]
                if scale_factor != 0:
                    self.add_rows(row_idx, row, scale_factor)
        self.basis[row] = col
        self.pivots += 1
        if PRINT:
            names = self.variable_names()
            print(
                "\n\n"
                f"Pivoting: moving variable {names[col]} into the basis"
                f" at row {row}."
                "\n\n"
            )
            print(self.latex_string())

    def solve(self):
        while not self.is_optimal():
            col = self.pivot_column()
            row = self.pivot_row(col)
            if row is None:
                if PRINT:
                    print(f"\n\nColumn {self.variable_names()[col]} has no pivot row.\n\n")
                raise Unbounded()
            self.pivot(row, col)
        return self

    def solution(self):
        """
        Read the variable values and the objective value from a solved
        tableau. A structural variable takes the right hand side of the
        first constraint row it is basic in, or 0 if it is non-basic.
        """
        status = self.status
        if status == UNBOUNDED:
            raise Unbounded()
        if status == UNSOLVED:
            raise Unsolved()

        values = []
        for col in range(self.num_variables):
            value = Rational(0)
            for row in range(self.num_constraints):
                if self.basis[row] == col:
                    value = self.tableau[row, -1]
                    break
            values.append(value)
        return values, self.d

    def variable_names(self):
        return (
            [f"{REAL_VAR}{i + 1}" for i in range(self.num_variables)]
            + [f"{SLACK_VAR}{i + 1}" for i in range(self.num_constraints)]
            + [EMPTY_VAR]
        )

    def display(self):
        """
        Displays the variables along with the tableau.
        """
        col_width = 10

        # Create the formatted header row for the tableau
        header = "".join(f"{var:>{col_width}}" for var in self.variable_names())
        print(header)

        for row in self.tableau.tolist():
            # Convert each value in the row to a string to avoid formatting errors
            formatted_row = "".join(
                f"{str(simplify(value)):>{col_width}}" for value in row
            )
            print(formatted_row)
        print()

    def latex_string(self):
        """
        Converts the tableau to a LaTeX formatted string.
        Returns a LaTeX string that can be used to display the tableau.
        """
        # Structural and slack columns, then the right hand side
        latex_str = (
            "\\begin{gather}\n\\begin{array}{|"
            + "r" * self.num_variables
            + "|"
            + "r" * self.num_constraints
            + "|r|}\n\\hline\n"
        )

        header_vars = [f"{REAL_VAR}_{{{i + 1}}}" for i in range(self.num_variables)]
        header_vars += [f"{SLACK_VAR}_{{{i + 1}}}" for i in range(self.num_constraints)]
        header_vars.append(EMPTY_VAR)

        latex_str += " & ".join(header_vars) + " \\\\\n\\hline\n"

        # Populate the table rows
        rows = self.tableau.tolist()
        for i, row in enumerate(rows):
            row_str = " & ".join(str(simplify(value)) for value in row)
            latex_str += row_str + " \\\\\n"
            if i == len(rows) - 2:
                latex_str += "\\hline\n"

        # Footer of the LaTeX table
        latex_str += "\\hline\n\\end{array}\n\\end{gather}\n"

        return latex_str
