"""Command line front end for gitsandbox."""
