"""Text input/output and the command-line runner."""
