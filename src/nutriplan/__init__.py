"""Nutrition calculation and meal-plan generation engine for clinic software."""

__version__ = "0.1.0"
