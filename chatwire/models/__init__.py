"""
Live entities built from raw API payloads.

- base.py: Base entity (client handle, patch/clone/update, snapshots)
- fields.py: local <-> wire field name translation
- integration.py: server integrations and their linked account
- application.py: the application behind an integration
- role.py, user.py, server.py: collaborating entities
"""
