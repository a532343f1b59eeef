"""API gateway exposing backend microservice operations as invokable tools."""

__version__ = "0.1.0"
