from .accepted_history import AcceptedHistory, WindowSnapshot

__all__ = ["AcceptedHistory", "WindowSnapshot"]
