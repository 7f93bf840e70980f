"""Calculation engine: pure functions over plain numbers."""
