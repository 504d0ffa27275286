"""
Ticket Triage - support request classification service
"""
__version__ = "1.0.0"
