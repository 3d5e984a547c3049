"""Command-line front end for the local dev library."""
