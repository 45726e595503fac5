"""Chess positions on variant boards up to 16x16, with custom piece movement patterns, bitboard masks, sliding attacks, FEN reading and Zobrist hashing."""

__version__ = "0.1.0"