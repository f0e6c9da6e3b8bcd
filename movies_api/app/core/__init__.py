"""Configuration, logging, database helpers and domain exceptions."""
