from .variable_store import VariableStore

__all__ = ['VariableStore']
