"""Cellular-automaton simulations: Conway's Game of Life and a forest-fire model."""

__version__ = "0.1.0"