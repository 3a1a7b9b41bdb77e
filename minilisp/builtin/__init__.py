from minilisp.builtin.table import BUILTINS, Builtin, builtin_function, dispatch

__all__ = ["BUILTINS", "Builtin", "builtin_function", "dispatch"]
