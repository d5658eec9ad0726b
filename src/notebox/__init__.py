"""
Notebox Backend - Personal Notes with Copy Sharing

A small REST backend for keeping notes and sharing copies of them with
other users.
"""

__version__ = "1.0.0"
