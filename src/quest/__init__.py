"""Detective Quest: mansion exploration, clue notebook and accusation."""
