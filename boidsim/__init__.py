"""Boid flocking simulation: vectors, spatial hashing, behaviour states, neighbour classification and unit data."""

__version__ = "0.1.0"