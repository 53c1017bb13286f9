# util.py -- Small helpers shared by the indentwriter modules

from typing import Iterable, Tuple, Any, Optional


def clip(lb: Optional[int], ub: Optional[int], x: int) -> int:
    '''Clamps x into [lb, ub]. A bound of None is ignored.'''
    if lb is not None and x < lb:
        return lb
    if ub is not None and x > ub:
        return ub
    return x

def repr_str(name: str, items: Iterable[Tuple[str, Any]]) -> str:
    '''Builds a repr() string like Name(k1=v1, k2=v2) from (key, value)
    pairs.'''
    args = ', '.join(f'{k}={v!r}' for k, v in items)
    return f'{name}({args})'
