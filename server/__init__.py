"""HTTP service package.

Import the app factory directly: `from server.main import create_app`.
"""

__all__: list[str] = []
