"""
Id-keyed registries for users, servers and roles.

Import the concrete stores from their modules; this package does not
re-export them so models can depend on stores without import cycles.
"""
