"""GraphQL layer: schema modules, composition and resolvers."""
