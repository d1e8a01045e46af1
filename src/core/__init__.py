"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of the significant-figure
model: decimal rounding primitives, the precision-aware number, token models,
and JSON contracts for their serialized form.
"""
