"""Board coordinates, enumerations and placement parsing."""
