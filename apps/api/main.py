# apps/api/main.py
from typing import Any, Literal

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from yamltree import config
from yamltree.document import Document
from yamltree.nodes import to_python

app = FastAPI(title="yamltree API", version="0.1.0")

ValueType = Literal["string", "int", "float", "bool", "node"]


class DocumentIn(BaseModel):
    text: str = ""


class Query(DocumentIn):
    path: str
    type: ValueType = "string"


class Assignment(DocumentIn):
    path: str
    value: str
    type: ValueType = "string"


def _read(doc: Document, path: str, value_type: str) -> Any:
    if value_type == "node":
        node = doc.resolve(path)
        return to_python(node) if node is not None else None
    readers = {
        "string": doc.get_string,
        "int": doc.get_int,
        "float": doc.get_float,
        "bool": doc.get_bool,
    }
    return readers[value_type](path)


def _write(doc: Document, path: str, raw: str, value_type: str) -> bool:
    if value_type == "string":
        return doc.set_string(path, raw)
    if value_type == "bool":
        return doc.set_bool(path, raw.strip() in config.TRUE_VALUES)
    try:
        if value_type == "int":
            return doc.set_int(path, int(raw))
        if value_type == "float":
            return doc.set_float(path, float(raw))
    except ValueError as exc:
        raise HTTPException(400, f"value {raw!r} is not a valid {value_type}") from exc
    raise HTTPException(400, f"cannot assign values of type {value_type!r}")


@app.get("/healthz", response_class=PlainTextResponse)
def healthz() -> str:
    return "ok"


@app.post("/documents/parse")
def parse(payload: DocumentIn) -> dict[str, Any]:
    return {"tree": Document.loads(payload.text).to_python()}


@app.post("/documents/query")
def query(payload: Query) -> dict[str, Any]:
    doc = Document.loads(payload.text)
    return {
        "path": payload.path,
        "found": doc.has(payload.path),
        "value": _read(doc, payload.path, payload.type),
    }


@app.post("/documents/set", response_class=PlainTextResponse)
def assign(payload: Assignment) -> str:
    doc = Document.loads(payload.text)
    if not _write(doc, payload.path, payload.value, payload.type):
        raise HTTPException(400, f"cannot assign to path {payload.path!r}")
    return doc.dumps()


@app.post("/documents/dump", response_class=PlainTextResponse)
def dump(payload: DocumentIn) -> str:
    return Document.loads(payload.text).dumps()
