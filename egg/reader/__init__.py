"""Egg reader: source cursor and recursive-descent parser."""
