"""Remote store, reconciler and local source services."""
