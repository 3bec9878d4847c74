"""Domain layer for DeedGuide.

Fact-sheet records and closed vocabularies shared by the guidance engine.
Framework-agnostic: nothing here imports Flask.
"""
