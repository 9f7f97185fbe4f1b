"""Ready-made search problems: sliding puzzle, grid world and the Romania road map."""
