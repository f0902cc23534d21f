"""Chirpy: a tiny microblogging API."""
