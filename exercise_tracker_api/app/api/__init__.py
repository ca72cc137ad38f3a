"""
API package.

``router.py`` exposes a top-level ``router`` that includes every
endpoint module in ``endpoints``; ``deps.py`` holds the request
dependencies they share.
"""
