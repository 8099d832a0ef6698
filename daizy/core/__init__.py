"""
Configuration, logging and exception types shared by the client.
"""
