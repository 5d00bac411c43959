"""Star Wars API digest: cached SWAPI fetches rendered as console reports."""
