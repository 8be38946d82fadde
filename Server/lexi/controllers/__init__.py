"""
Controllers Package

HTTP blueprints exposing the puzzle engine.
"""
