"""Domain layer for the Window Humidity Advisor.

This package contains the psychrometric core: the formulas that turn an
outdoor reading into a predicted indoor relative humidity, and the rules
that turn that prediction into a recommendation.

The domain layer is pure Python with no dependencies on Flask, HTTP
clients, or any particular weather provider.
"""
