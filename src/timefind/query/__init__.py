# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Constraint representation, selector parsing and occurrence search."""
