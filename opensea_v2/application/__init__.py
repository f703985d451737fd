"""
Application Layer
"""
