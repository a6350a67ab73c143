"""Codec for the structured sub-object stored in ``inductions.notes``.

The column holds a JSON object. Rows written before the structure existed
carry free text, which decodes as ``additional_notes``.
"""

from __future__ import annotations

import json
import logging

from pydantic import BaseModel

logger = logging.getLogger("opsflow.inductions")


class InductionDetails(BaseModel):
    portal_url: str | None = None
    username: str | None = None
    password: str | None = None
    document_url: str | None = None
    additional_notes: str | None = None


def encode_details(details: InductionDetails | None) -> str | None:
    if details is None:
        return None
    payload = details.model_dump(exclude_none=True)
    if not payload:
        return None
    return json.dumps(payload, sort_keys=True)


def decode_details(notes: str | None) -> InductionDetails:
    if not notes:
        return InductionDetails()
    text = notes.strip()
    if text.startswith("{"):
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            logger.warning("Induction notes look like JSON but failed to parse")
        else:
            if isinstance(data, dict):
                return InductionDetails.model_validate(data)
    return InductionDetails(additional_notes=notes)
