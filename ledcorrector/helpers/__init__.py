"""Helper utilities for the LED color corrector."""
