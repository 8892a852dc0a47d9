"""Plotting scripts for benchmark results."""
