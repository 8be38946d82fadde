"""
WebSocket Package

Socket.IO event handlers exposing the puzzle engine.
"""
