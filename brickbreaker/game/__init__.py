"""Brick Breaker simulation: entities, physics, bricks and power-ups."""
