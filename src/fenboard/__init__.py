"""fenboard — chess position model with a FEN codec and board rendering."""

__version__ = "0.1.0"
