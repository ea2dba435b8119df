"""
URL redirect service.

Maps short paths to target URLs stored in a key-value store, serves
redirects, and exposes a management page at the reserved register path.
"""
