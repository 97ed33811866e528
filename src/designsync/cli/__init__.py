"""designsync command-line interface."""
