"""Display helpers: value rendering, unparsing and pretty printing."""
