"""Infrastructure layer for the Window Humidity Advisor.

This package contains implementations of domain interfaces
that interact with external systems (weather APIs, HTTP API).
"""
