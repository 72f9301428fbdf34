"""HTTP service exposing LED color correction."""
