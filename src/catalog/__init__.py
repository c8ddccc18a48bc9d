"""Product catalog REST service.

An in-memory product store exposed through a FastAPI application, with a
repository, a validating service layer and an HTTP router on top.
"""

__version__ = "0.1.0"
