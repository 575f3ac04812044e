"""Web interfaces."""
