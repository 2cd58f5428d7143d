"""Falling Blocks: a minimal falling-block puzzle engine."""
