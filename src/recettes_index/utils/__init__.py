"""Utilities package for the recettes-index data-access layer."""
