"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import CharChoice, GameSnapshot, GameState, InvalidSecretError, Status

__all__ = ['CharChoice', 'GameSnapshot', 'GameState', 'InvalidSecretError', 'Status']
