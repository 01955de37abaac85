"""
Domain Layer - Core Client State

This layer contains the entities, value objects and stores that mirror server
state on the client (cart, favorites, list queries, session). It is independent
of transport and storage details, which are injected as collaborators.
"""
