from typing import Callable, Optional
from dataclasses import dataclass

@dataclass
class Law:
    commutative: bool = False
    involution: bool = False
    total: bool = True

def law(
    commutative: bool = False,
    involution: bool = False,
    total: bool = True,
):
    def decorator(func):
        func._law = Law(
            commutative=commutative,
            involution=involution,
            total=total,
        )
        return func
    return decorator

def partial(reason: str):
    def decorator(func):
        func._partial = True
        func._partial_reason = reason
        # May raise for some inputs, so no algebraic law is promised
        func._law = Law(total=False)
        return func
    return decorator

def laws_of(func: Callable) -> Optional[Law]:
    return getattr(func, "_law", None)
