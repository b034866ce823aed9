"""Evaluation engine: expression dispatch, application and special forms."""
