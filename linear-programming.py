"""Program to solve linear programming problems. This program uses the Simplex
Algorithm to find the optimal solution to the LP. In its current state, there
are inputs for which the algorithm will misbehave as no anti-cycling rules have
been put in place.

@author Suchith Sridhar Khajjayam
@date 27 Sep 2024
"""

import tableau as tableau_module
from problem import Constraint, build
from tableau import Unbounded

tableau_module.PRINT = True

# maximize 2x + 3y
constraints = [
    Constraint([2, 1], 18),
    Constraint([6, 5], 60),
    Constraint([2, 5], 40),
]
objective = [2, 3]
"""constraints = [Constraint([4, -2, 2], 4), Constraint([2, -1, 1], 1)]
objective = [3, 2, -5]"""

tableau = build(constraints, objective)
print("\\subsection{Simplex Initialization}\n")
print("\n\nInitital Tableau:\n\n")
print(tableau.latex_string())

print()
print("Is inital BFS feasible: ", tableau.is_basic_feasible())
print()

print("\n\\subsection{Simplex Optimization}\n")

try:
    tableau.solve()
except Unbounded as exc:
    print(f"\n\n{exc}.\n")
else:
    print("\n\nSolved Tableau:\n\n")
    print(tableau.latex_string())
    values, objective_value = tableau.solution()
    for name, value in zip(tableau.variable_names(), values):
        print(f"{name} = {value}")
    print(f"z = {objective_value}")
