"""Timeline services."""
