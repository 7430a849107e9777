"""Click commands for the quoth CLI."""
