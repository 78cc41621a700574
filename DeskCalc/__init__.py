"""Desk calculator: incremental expression input, two-stack evaluation, precision-aware formatting."""
