"""Infrastructure layer - graph document files and NetworkX interop.

This layer depends on the domain layer and third-party libs (ruamel.yaml, NetworkX).
It must never import from services, commands, or output.
"""
