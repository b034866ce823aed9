"""Top-scope library of host functions registered into every interpreter."""
