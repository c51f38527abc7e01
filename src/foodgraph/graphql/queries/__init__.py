"""Root query fragments contributed by schema modules."""
