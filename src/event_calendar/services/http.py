from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from hypercorn.asyncio import serve
from hypercorn.config import Config
from pydantic import BaseModel, Field

from ..api import UnknownApiFunctionError, api_state, call_api, get_api_functions

logger = logging.getLogger(__name__)

app = FastAPI(title="Event Calendar API", version="0.1.0")


class ApiCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


@app.get("/health")
def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "service": api_state.context.service_name,
        "events": len(api_state.context.store),
    }


@app.get("/api/functions")
def list_functions() -> Dict[str, Any]:
    return {"functions": [spec.describe() for spec in get_api_functions()]}


# Sync handler: FastAPI runs it in its threadpool, so calls reach the store concurrently.
@app.post("/api/functions/{function_name}")
def invoke_function(function_name: str, request: ApiCallRequest) -> Dict[str, Any]:
    try:
        result = call_api(function_name, **request.arguments)
    except UnknownApiFunctionError as exc:
        logger.warning("API function not found: %s", function_name)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except (TypeError, ValueError) as exc:
        logger.warning("API function %s rejected arguments: %s", function_name, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    logger.debug("API function %s executed successfully", function_name)
    return {"name": function_name, "result": result}


async def _serve(config: Config) -> None:
    await serve(app, config)


def run_local_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("%s listening on http://%s:%d", api_state.context.service_name, host, port)
    asyncio.run(_serve(config))
