"""Grid-based bomber arcade game logic: field, player and enemies."""

__version__ = "0.1.0"
__all__ = ["items", "field", "player", "enemy"]