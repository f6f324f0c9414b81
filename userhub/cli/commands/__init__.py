"""UserHub CLI command implementations."""
