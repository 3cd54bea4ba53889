"""
Plain data describing a linear program, and construction of its initial
tableau.

    Constraint([2, -3], 15)   ~   2x - 3y <= 15
    Objective([2, 3])         ~   maximize 2x + 3y

@author Suchith Sridhar Khajjayam
@date 27 Sep 2024
"""

from collections import namedtuple

from sympy import zeros, eye

from tableau import LPError, Tableau, to_rational


class DimensionMismatch(LPError):
    pass


class Constraint(namedtuple("Constraint", ["coefficients", "right_hand_side"])):
    __slots__ = ()

    def __new__(cls, coefficients, right_hand_side):
        return super().__new__(cls, tuple(coefficients), right_hand_side)


class Objective(tuple):
    """
    Coefficients of the objective function, which is always maximized.
    """

    __slots__ = ()


def build(constraints, objective):
    constraints = list(constraints)
    objective = Objective(objective)
    num_constraints, num_variables = len(constraints), len(objective)

    for i, constraint in enumerate(constraints):
        if len(constraint.coefficients) != num_variables:
            raise DimensionMismatch(
                f"constraint {i} has {len(constraint.coefficients)} coefficients,"
                f" objective has {num_variables}"
            )

    tableau = zeros(num_constraints + 1, num_variables + num_constraints + 1)
    if num_constraints:
        tableau[:num_constraints, num_variables:-1] = eye(num_constraints)
    for i, constraint in enumerate(constraints):
        for j, coefficient in enumerate(constraint.coefficients):
            tableau[i, j] = to_rational(coefficient)
        tableau[i, -1] = to_rational(constraint.right_hand_side)

    # Maximizing means driving the negated coefficients up to zero
    for j, coefficient in enumerate(objective):
        tableau[-1, j] = -to_rational(coefficient)

    return Tableau(tableau)


def solve(constraints, objective):
    return build(constraints, objective).solve().solution()
