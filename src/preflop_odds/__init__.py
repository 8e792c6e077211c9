"""Preflop Odds - Monte Carlo win/tie/loss rates for Texas Hold'em starting hands."""

__version__ = "0.1.0"
