"""
Weather MCP on Lambda - two small FastAPI services for the Lambda Web Adapter.
"""

__version__ = "1.0.0"
