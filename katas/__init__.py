"""
Katas - a terminal tracker for recurring programming exercises.

Keeps a YAML list of katas with the dates they were completed and shows a
mastery level that grows with repetition and decays with time.
"""

__version__ = "1.0.0"
