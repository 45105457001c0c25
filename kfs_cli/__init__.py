"""Command-line front end for KFS addressing."""
