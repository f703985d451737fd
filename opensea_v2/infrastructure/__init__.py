"""
Infrastructure Layer
"""
