"""
habitat/session - Editable layout sessions.
"""

from habitat.session.layout_session import LayoutSession

__all__ = [
    'LayoutSession',
]
