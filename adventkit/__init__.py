"""Solvers for Advent of Code puzzles from 2018 to 2024, one module per day."""

__version__ = "0.1.0"