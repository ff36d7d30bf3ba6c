# Storyblok MCP Server
# File: tools/__init__.py
# Version: v1

"""MCP tools exposed by the Storyblok server (see ``tasks``)."""
