"""chessduel: a two-player chess game with an optional computer opponent."""
