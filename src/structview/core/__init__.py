"""Destructuring core: resolvers, collections, parameters and the registry."""
