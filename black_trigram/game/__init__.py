"""Game logic for the combat engine.

- catalog: Static stances, techniques, vital points and archetypes
- entities: Player snapshots and status effects
- combat: Hit detection, damage calculation and action resolution
- training: Training-mode scoring
"""
