"""geospine command line interface."""
