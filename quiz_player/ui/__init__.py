"""Qt UI components for the quiz player."""
