"""Shared inputs and re-evaluation.

Builds `a + b * c`, sets the inputs, evaluates it and evaluates again after
changing one input. Debug logging shows every node the evaluator visits.
"""

import logging

import compgraph as cg

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
logger = logging.getLogger(__name__)

a = cg.create_input("a")
b = cg.create_input("b")
c = cg.create_input("c")

result = cg.sum(cg.clone(a), cg.mul(cg.clone(b), cg.clone(c)))
logger.info("%s", result)

cg.set(a, 10.0)
cg.set(b, 50.0)
cg.set(c, 30.0)

logger.info("compute: %s", cg.compute(result))
logger.info("compute: %s", cg.compute(result))

cg.set(a, 20.0)
logger.info("compute: %s", cg.compute(result))
