"""Domain operations and field resolvers for the GraphQL API.

Every function here takes the request context explicitly as a parameter.
"""
