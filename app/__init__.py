# app/__init__.py

"""
Nearby Opportunity Hub web application.

1. Builds a grounded Gemini search for companies near a location.
2. Parses the markdown answer into company cards and collects its sources.
3. Keeps the five most recent search locations per visitor.
"""
