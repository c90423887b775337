"""Brick Breaker skins for rendering."""

from .base import BrickBreakerSkin
from .geometric import GeometricSkin, Particle

SKINS = {
    GeometricSkin.NAME: GeometricSkin,
}

__all__ = [
    'BrickBreakerSkin',
    'GeometricSkin',
    'Particle',
    'SKINS',
]
