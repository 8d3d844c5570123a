"""
Pokeguess - "Who's that Pokémon?" guessing game

A small single-player game built around a hint disclosure engine:
- Draws a random creature from the public catalog (PokeAPI)
- Unlocks one hint immediately, then one more per wrong guess
- Ends in a win or a loss after a fixed number of attempts
- Exposed through a REST API and a terminal play loop
"""

__version__ = "0.1.0"
