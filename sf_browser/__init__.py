"""Browse and export game player rosters."""
