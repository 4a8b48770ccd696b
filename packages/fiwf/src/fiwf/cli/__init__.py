"""CLI fi-compress / fi-decompress."""
