# dynamic_value/adapters/http/__init__.py

"""HTTP collaborator"""

# Local imports
from dynamic_value.adapters.http.client import HttpClient

__all__ = ["HttpClient"]
