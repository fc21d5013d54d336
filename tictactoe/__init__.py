"""Tic-tac-toe rules engine and computer opponent."""
