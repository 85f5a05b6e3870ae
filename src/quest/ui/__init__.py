"""Console and Textual front ends."""
