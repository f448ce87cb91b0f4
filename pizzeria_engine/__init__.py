"""Frame-driven game logic for a pizzeria stealth simulation: vectors, keys, animation, collision, events, camera overlays, the boss and UI widgets."""

__version__ = "0.1.0"