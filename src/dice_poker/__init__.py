"""
Dice Poker.

Single-player dice-and-card game: roll dice for currency, action points and
bonus draws, then spend action points playing cards from a dealt hand.
"""
