"""Core services: configuration, logging, Spotify Web API and player control."""
