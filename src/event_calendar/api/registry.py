from __future__ import annotations

import inspect
import types
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Union, get_args, get_origin


class UnknownApiFunctionError(KeyError):
    """Raised when calling a function name that was never registered."""


def _json_type(annotation: Any) -> str:
    origin = get_origin(annotation)
    if origin is None:
        mapping = {
            str: "string",
            int: "integer",
            float: "number",
            bool: "boolean",
            dict: "object",
            list: "array",
        }
        return mapping.get(annotation, "string")
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return _json_type(args[0]) if args else "string"
    if origin in (list, List):
        return "array"
    if origin in (dict, Dict):
        return "object"
    return "string"


@dataclass(frozen=True)
class ApiFunction:
    name: str
    func: Callable[..., Any]
    description: str
    tags: tuple[str, ...]
    signature: inspect.Signature

    @property
    def parameters(self) -> Dict[str, Dict[str, Any]]:
        described: Dict[str, Dict[str, Any]] = {}
        for param in self.signature.parameters.values():
            required = param.default is inspect.Parameter.empty
            entry: Dict[str, Any] = {"type": _json_type(param.annotation), "required": required}
            if not required:
                entry["default"] = param.default
            described[param.name] = entry
        return described

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "tags": list(self.tags),
            "parameters": self.parameters,
        }


REGISTRY: Dict[str, ApiFunction] = {}


def register_api(
    name: str,
    *,
    description: str,
    tags: Optional[Iterable[str]] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in REGISTRY:
            raise ValueError(f"API function '{name}' is already registered.")
        REGISTRY[name] = ApiFunction(
            name=name,
            func=func,
            description=description,
            tags=tuple(tags or ()),
            signature=inspect.signature(func, eval_str=True),
        )
        return func

    return decorator


def get_api_functions() -> List[ApiFunction]:
    return list(REGISTRY.values())


def call_api(function_name: str, /, **kwargs: Any) -> Any:
    api_function = REGISTRY.get(function_name)
    if api_function is None:
        raise UnknownApiFunctionError(f"API function '{function_name}' is not registered.")
    return api_function.func(**kwargs)
