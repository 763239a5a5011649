"""
Stores - the formula and tuning tables the core queries by name.

Built once at startup from the persisted YAML tables and then passed
explicitly to the tools that need them.
"""

from chuk_mcp_theory.stores.formulas import FormulaStore
from chuk_mcp_theory.stores.tunings import TuningStore

__all__ = [
    "FormulaStore",
    "TuningStore",
]
