"""
Storage module
Goal and user persistence backends
"""
from .base import GoalStore
from .memory_store import InMemoryGoalStore
from .supabase_store import SupabaseGoalStore

__all__ = ['GoalStore', 'InMemoryGoalStore', 'SupabaseGoalStore']
