"""
Persistence layer: database engine lifecycle and the document session.
"""
