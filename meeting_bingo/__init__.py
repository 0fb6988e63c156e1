"""Meeting Bingo — FastAPI backend.

Turns a live meeting transcript into progress on a 5×5 buzzword bingo
card: word detection with aliases, win-line detection, and a persisted,
resumable game state machine.
"""
