"""termsnake - Terminal snake game with a persisted high-score ledger"""

__version__ = "0.1.0"
