"""HTTP service exposing the extraction pipeline."""
