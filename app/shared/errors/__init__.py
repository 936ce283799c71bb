"""
Shared error handling package.

dispatcher.py decides status, code and message for a classified error;
handlers.py wires it into FastAPI; messages.py holds the localized text.
"""
