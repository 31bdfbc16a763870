"""Presentation layer: public facade and pytest plugin."""
