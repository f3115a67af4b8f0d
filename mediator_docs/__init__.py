"""mediator-docs - Shiny.Mediator documentation tools for AI coding assistants.

Usage:
    from mediator_docs.server import mcp
    mcp.run()  # stdio transport

    from mediator_docs.server import build_server
    from mediator_docs.resolvers import FilesystemResolver
    mcp = build_server(FilesystemResolver(root, "SKILL.md", "README.md"))
"""

__version__ = "0.1.0"
