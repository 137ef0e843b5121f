"""Moodlog - mental fitness journal."""
