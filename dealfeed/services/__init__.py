"""Business logic on top of the store.

Services own multi-step operations that must not interleave with other
writers (they hold the store lock across their steps) and per-viewer
decoration of the store's composed views.
"""
