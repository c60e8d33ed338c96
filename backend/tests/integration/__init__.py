"""
Integration tests package.

Exercises the Flask application end to end through the test client.
"""
