from __future__ import annotations

from typing import Dict, List

from .registry import get_api_functions, register_api


@register_api(
    "list_available_functions",
    description="List every registered calendar function with its description and parameters.",
    tags=("meta",),
)
def list_available_functions() -> Dict[str, List[dict]]:
    functions = [func.describe() for func in sorted(get_api_functions(), key=lambda item: item.name)]
    return {"functions": functions}
