"""HTTP plumbing: per-call options, requests and response classification."""

from gitlab_rest.http.options import Options
from gitlab_rest.http.request import ALLOWED_METHODS, Request
from gitlab_rest.http.response import Response

__all__ = ["ALLOWED_METHODS", "Options", "Request", "Response"]
