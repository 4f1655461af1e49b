"""
GitOps demo service.

A tiny Flask application deployed to Kubernetes through a CI-built image and
an Argo CD managed manifest repository.
"""
__version__ = "2.0"
