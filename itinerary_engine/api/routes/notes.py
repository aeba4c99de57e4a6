"""
api/routes/notes.py
-------------------
POST /v1/notes/encode    : note + links → stored description
POST /v1/notes/decode    : stored description → note + links
POST /v1/notes/add-link  : validate and append one user-entered link
"""
from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from itinerary_engine.modules.notes import link_composer

router = APIRouter()


class EncodeRequest(BaseModel):
    note: str = ""
    links: list[str] = Field(default_factory=list)


class DecodeRequest(BaseModel):
    stored: str = ""


class AddLinkRequest(BaseModel):
    links: list[str] = Field(default_factory=list)
    candidate: str


@router.post("/encode", summary="Compose a description from a note and links")
def encode(req: EncodeRequest) -> dict:
    invalid = [link for link in req.links if not link_composer.is_valid_link(link)]
    if invalid:
        raise HTTPException(
            status_code=422,
            detail={"errors": [f"link={link!r} is not a valid URL or domain" for link in invalid]},
        )
    links = [link_composer.normalize_link(link) for link in req.links]
    return {"stored": link_composer.encode(req.note, links)}


@router.post("/decode", summary="Split a description into note and links")
def decode(req: DecodeRequest) -> dict:
    decoded = link_composer.decode(req.stored)
    return {"note": decoded.note, "links": decoded.links}


@router.post("/add-link", summary="Validate and append a link")
def add_link(req: AddLinkRequest) -> dict:
    links, check = link_composer.append_link(req.links, req.candidate)
    if not check:
        raise HTTPException(status_code=422, detail={"errors": check.errors})
    return {"links": links}
