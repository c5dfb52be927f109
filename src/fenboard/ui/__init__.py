"""PyQt6 front end: a window that shows the board and accepts FEN input."""
