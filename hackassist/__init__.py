"""Assistant for the Fallout terminal hacking minigame: solver, session state, word store and command."""

__version__ = "0.1.0"