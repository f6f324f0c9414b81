"""UserHub command-line interface."""
