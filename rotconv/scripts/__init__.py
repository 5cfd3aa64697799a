"""
Command line tools built on rotconv.
"""
