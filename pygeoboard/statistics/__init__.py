"""
Statistics on flat numeric sequences.

Small, stateless helpers modelled on R, usable on plain lists as well as
on slider values.

Public API:
    sum, prod, mean, median, variance, sd, weighted_mean  - reductions
    min, max, range                                       - extremes
    abs, add, subtract, multiply, div, divide, mod        - elementwise ops
"""

from pygeoboard.statistics.arithmetic import (
    abs,
    add,
    subtract,
    multiply,
    div,
    divide,
    mod,
)
from pygeoboard.statistics.reductions import (
    sum,
    prod,
    mean,
    median,
    variance,
    sd,
    weighted_mean,
    min,
    max,
    range,
)

__all__ = [
    "sum",
    "prod",
    "mean",
    "median",
    "variance",
    "sd",
    "weighted_mean",
    "min",
    "max",
    "range",
    "abs",
    "add",
    "subtract",
    "multiply",
    "div",
    "divide",
    "mod",
]
