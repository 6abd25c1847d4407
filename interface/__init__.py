"""
Interface package: front ends for the chess engine.

Modules:
    cli — Command-line front end: single best move, interactive play against
          the engine, self-play and the benchmark. Installed as the `scacchi`
          console script; can also be run as `python -m interface.cli`.
"""
