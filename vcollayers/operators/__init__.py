"""Operator registrations and definitions."""

from . import color_layers
