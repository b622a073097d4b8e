"""Pebbles - a two-player subtraction game against an automated opponent.

Players alternately remove between 1 and a configured maximum number of
pebbles from a shared pile; whoever removes the last pebble wins.
"""

__version__ = "0.1.0"
