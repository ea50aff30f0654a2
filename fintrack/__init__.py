"""
fintrack - Source Package

Personal finance tracking core: records go in, derived metrics come out
(net worth, safe-to-spend, financial health score, recommendations).

DESIGN PRINCIPLES:
1. Calculators are pure functions over aggregated scalars
2. Every input maps to a defined output, never an exception
3. "Unknown" is a first-class result, not a low score
4. Aggregation, validation and audit live outside the calculators
5. Same input, same output
"""

__version__ = "1.0.0"
__author__ = "fintrack Team"
