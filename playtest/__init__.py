"""Scripted playthroughs against fresh game engines."""
