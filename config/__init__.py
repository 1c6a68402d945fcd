"""
Configuration package for the Dark Web Leak Monitor
"""
