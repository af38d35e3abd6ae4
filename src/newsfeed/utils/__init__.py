"""Utilities for the newsfeed application."""
