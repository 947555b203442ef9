"""Menu views and the navigator that runs them."""
