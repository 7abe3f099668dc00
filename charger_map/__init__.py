"""Charging station map: review metrics and proximity ranking."""
