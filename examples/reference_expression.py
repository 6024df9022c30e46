"""The reference expression x1 + x2 * sin(x2 + x3^3).

x2 is used twice; the evaluator computes it once per pass.
"""

import compgraph as cg

with cg.use_graph() as graph:
    x1 = cg.create_input_with("x1", 10.0)
    x2 = cg.create_input_with("x2", 20.0)
    x3 = cg.create_input_with("x3", 30.0)

    expr = x1 + x2 * cg.sin(x2 + x3**3)

result = cg.evaluate(expr)
print(f"{expr} = {result.value!r}")  # noqa: T201
print(f"{len(graph)} nodes, {result.evaluations} operator applications")  # noqa: T201
print("inputs:", ", ".join(f"{h.name}={h.value}" for h in cg.inputs(expr)))  # noqa: T201
print("affected by x3:", ", ".join(str(h) for h in cg.dependents(x3)))  # noqa: T201
