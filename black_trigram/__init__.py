"""Black Trigram combat resolution engine.

Stance, technique and vital point driven combat for a Korean martial arts
game. The engine is synchronous and pure: callers pass player snapshots in
and receive result records with new snapshots out.
"""

__version__ = "0.1.0"
