"""Penerjemah Kitab Arab: word-by-word Arabic to Indonesian translation."""
