"""Player records, the roster store and the stat sheet layout."""
