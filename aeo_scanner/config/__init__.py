"""Configuration and scoring profiles."""
